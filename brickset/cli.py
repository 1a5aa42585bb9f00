"""Command-line front end for the LEGO-set queries.

Usage:
    brickset                       # run the demo queries
    brickset pieces under 500
    brickset theme Games
    brickset --data-file sets.json packaging
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from pydantic import ValidationError

from brickset.core.config import LOG_LEVELS, get_settings
from brickset.core.errors import InvalidPositionError, RepositoryLoadError
from brickset.core.logging import configure_logging, get_logger
from brickset.models.position import Position
from brickset.repository.lego_sets import LegoSetRepository

logger = get_logger(__name__)

DEMO_PIECES = 500
DEMO_THEME = "Games"
NO_DATA = "no data"


def _position(text: str) -> Position:
    try:
        return Position.parse(text)
    except InvalidPositionError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def banner(title: str) -> str:
    return f"<{'-' * 30} {title} {'-' * 30}>"


def _or_no_data(value: object) -> str:
    return NO_DATA if value is None else str(value)


def cmd_tags(repo: LegoSetRepository, args: argparse.Namespace) -> List[str]:
    return [str(repo.count_by_tag(args.tag))]


def cmd_pieces(repo: LegoSetRepository, args: argparse.Namespace) -> List[str]:
    return [str(repo.count_by_piece_count(args.position, args.pieces))]


def cmd_theme(repo: LegoSetRepository, args: argparse.Namespace) -> List[str]:
    return [str(s) for s in repo.filter_by_theme(args.theme)]


def cmd_max_tags(repo: LegoSetRepository, args: argparse.Namespace) -> List[str]:
    return [_or_no_data(repo.max_tag_count())]


def cmd_largest(repo: LegoSetRepository, args: argparse.Namespace) -> List[str]:
    return [_or_no_data(repo.largest_volume_name())]


def cmd_packaging(repo: LegoSetRepository, args: argparse.Namespace) -> List[str]:
    return [f"{label}: {count}" for label, count in repo.count_by_packaging_type().items()]


def cmd_demo(repo: LegoSetRepository, args: argparse.Namespace) -> List[str]:
    lines = [banner("pieces")]
    under = repo.count_by_piece_count(Position.UNDER, DEMO_PIECES)
    lines.append(f"Sets with fewer than {DEMO_PIECES} pieces: {under}")

    lines.append(banner("theme"))
    lines.append(f"Sets with theme {DEMO_THEME}:")
    lines.extend(str(s) for s in repo.filter_by_theme(DEMO_THEME))

    lines.append(banner("tags"))
    lines.append(f"Max number of tags on a set: {_or_no_data(repo.max_tag_count())}")

    lines.append(banner("volume"))
    lines.append(f"Largest set by volume: {_or_no_data(repo.largest_volume_name())}")

    lines.append(banner("packaging"))
    lines.append("Sets per packaging type:")
    lines.extend(f"{label}: {count}" for label, count in repo.count_by_packaging_type().items())
    return lines


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="brickset", description="Query the LEGO-set dataset.")
    parser.add_argument("--version", action="version", version=f"{settings.app_name} {settings.version}")
    parser.add_argument("--data-file", help="JSON dataset to load (default: bundled brickset.json)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="logging level (default: %(default)s)",
    )
    parser.set_defaults(handler=cmd_demo)
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    p = sub.add_parser("tags", help="count sets carrying a tag")
    p.add_argument("tag")
    p.set_defaults(handler=cmd_tags)

    p = sub.add_parser("pieces", help="count sets under/over a piece count")
    p.add_argument("position", type=_position, metavar="{under,over}")
    p.add_argument("pieces", type=int)
    p.set_defaults(handler=cmd_pieces)

    p = sub.add_parser("theme", help="list sets of a theme")
    p.add_argument("theme")
    p.set_defaults(handler=cmd_theme)

    p = sub.add_parser("max-tags", help="largest number of tags on one set")
    p.set_defaults(handler=cmd_max_tags)

    p = sub.add_parser("largest", help="name of the set with the biggest volume")
    p.set_defaults(handler=cmd_largest)

    p = sub.add_parser("packaging", help="number of sets per packaging type")
    p.set_defaults(handler=cmd_packaging)

    p = sub.add_parser("demo", help="run the demonstration queries")
    p.set_defaults(handler=cmd_demo)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        parser = build_parser()
    except ValidationError as e:
        print(f"error: invalid BRICKSET_ settings: {e}", file=sys.stderr)
        return 2
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        repo = LegoSetRepository(args.data_file)
    except RepositoryLoadError as e:
        logger.debug("load failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    for line in args.handler(repo, args):
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
