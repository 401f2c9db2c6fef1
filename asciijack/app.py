"""asciijack — play one round of Blackjack against the dealer in the terminal.

Run:
    asciijack <input_folder> [seed] [--log-level DEBUG]
    python -m asciijack.app asciijack/data/cards 42

<input_folder> holds the 13 card-art files (ace.txt, king.txt, ..., 2.txt).
The seed defaults to the current Unix time; pass one to replay a deal.
Commands are read from stdin: 'h' to hit, 's' to stand.

Exit codes:
    0   round completed
   -1   bad arguments
   -2   out of memory while loading card art
   -3   missing or malformed card-art file
   -4   stdin closed before the round finished
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Sequence

from asciijack.art import AssetError, load_card_faces
from asciijack.engine.game_state import InputClosedError, new_round, play_round

ARGUMENTS_ERROR = -1
MEMORY_ERROR = -2
FILE_ERROR = -3
INPUT_ERROR = -4

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Raised by the argument parser in place of exiting."""


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting, so main() picks the code."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = _Parser(
        prog=prog,
        description="Play one round of Blackjack against the dealer.",
    )
    parser.add_argument('input_folder', help="directory holding the 13 card-art files")
    parser.add_argument(
        'seed', nargs='?', type=int, default=None,
        help="shuffle seed (default: current Unix time)",
    )
    parser.add_argument(
        '--log-level', default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help="logging level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        print(f"usage: {parser.prog} <input_folder> [seed]")
        logger.debug("Argument error: %s", exc)
        return ARGUMENTS_ERROR

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    seed = args.seed if args.seed is not None else int(time.time())
    logger.info("Starting round with seed %d", seed)

    try:
        faces = load_card_faces(args.input_folder)
    except MemoryError:
        print("[ERR] Out of memory.")
        return MEMORY_ERROR
    except AssetError as exc:
        logger.error("%s", exc)
        print("[ERR] Invalid File(s).")
        return FILE_ERROR

    context = new_round(faces, seed)
    try:
        result = play_round(context)
    except InputClosedError as exc:
        logger.error("%s", exc)
        print("[ERR] Input closed.")
        return INPUT_ERROR

    logger.info("%s", result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
