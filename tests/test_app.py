import pytest

from sokoban.app import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert str(args.level).replace("\\", "/") == "levels/level.txt"
    assert str(args.assets) == "assets"
    assert args.number == 1
    assert args.fps == 60.0
    assert args.size is None


def test_parser_values():
    args = build_parser().parse_args(
        ["--level", "x.txt", "--number", "2", "--fps", "30", "--size", "800", "600"]
    )
    assert str(args.level) == "x.txt"
    assert args.number == 2
    assert args.fps == 30.0
    assert args.size == [800, 600]


def test_parser_rejects_non_positive_fps():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["--fps", "0"])
    assert info.value.code == 2


def test_main_missing_level(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["--assets", str(tmp_path), "--level", str(tmp_path / "missing.txt")])
    assert info.value.code == 2


def test_main_missing_assets_dir(tmp_path):
    level = tmp_path / "level.txt"
    level.write_text("#P#\n", encoding="utf-8")
    with pytest.raises(SystemExit) as info:
        main(["--assets", str(tmp_path / "nowhere"), "--level", str(level)])
    assert info.value.code == 2


def test_main_missing_texture_files(tmp_path):
    level = tmp_path / "level.txt"
    level.write_text("#P#\n", encoding="utf-8")
    assets = tmp_path / "assets"
    assets.mkdir()
    with pytest.raises(SystemExit) as info:
        main(["--assets", str(assets), "--level", str(level)])
    assert info.value.code == 2