"""Command line entry point."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

import pygame

from sokoban.game import Game
from sokoban.levels import GameInitRoom, GameLevelRoom
from sokoban.room import Room
from sokoban.textures import TextureManager


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {text}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sokoban", description="Push every box onto a goal square."
    )
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="texture directory")
    parser.add_argument(
        "--level", type=Path, default=Path("levels/level.txt"), help="level file to play"
    )
    parser.add_argument("--number", type=int, default=1, help="number of the level")
    parser.add_argument("--fps", type=_positive_float, default=60.0, help="frame rate")
    parser.add_argument(
        "--size",
        nargs=2,
        type=_positive_int,
        metavar=("WIDTH", "HEIGHT"),
        help="window size in pixels",
    )
    return parser


class _Session:
    """Wires the level room to the running game."""

    def __init__(self, args: argparse.Namespace, textures: TextureManager) -> None:
        self.args = args
        self.textures = textures
        self.game: Optional[Game] = None

    def _require_game(self) -> Game:
        if self.game is None:
            raise RuntimeError("the game has not started")
        return self.game

    def level_room(self) -> Room:
        game = self._require_game()
        return GameLevelRoom(
            self.args.level,
            self.args.number,
            self.textures,
            game.keyboard,
            game.window_resolution,
            self.report,
            self.leave,
            self.level_room,
        )

    @staticmethod
    def report(level: int, steps: int) -> None:
        print(f"Level {level} complete in {steps} steps")

    def leave(self) -> None:
        self._require_game().is_open = False


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.assets.is_dir():
        parser.error(f"asset directory not found: {args.assets}")
    if not args.level.is_file():
        parser.error(f"level file not found: {args.level}")
    textures = TextureManager()
    session = _Session(args, textures)
    try:
        init_room = GameInitRoom(textures, args.assets, session.level_room)
    except (FileNotFoundError, pygame.error) as exc:
        parser.error(str(exc))
    game = Game(init_room)
    session.game = game
    game.fps = args.fps
    if args.size:
        game.set_window_resolution(*args.size)
    try:
        game.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())