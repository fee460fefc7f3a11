from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List

from .card import card_label
from .config import DeckConfig, DeckConfigError, build_from_config, load_config
from .options import DeckOptionError

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _step(kind: str):
    def _parse(value: str):
        return (kind, value)

    return _parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build and print a deck of playing cards")
    parser.add_argument("--config", type=Path, help="Path to deck JSON config")
    # Option flags share one destination so they apply in command-line order.
    parser.add_argument(
        "--jokers", dest="steps", action="append", type=_step("jokers"), metavar="N",
        help="Append N jokers",
    )
    parser.add_argument(
        "--extra-decks", dest="steps", action="append", type=_step("extra_decks"), metavar="K",
        help="Append K copies of the deck built so far",
    )
    parser.add_argument(
        "--exclude-rank", dest="steps", action="append", type=_step("exclude_ranks"),
        metavar="RANK", help="Drop every card of RANK (e.g. Two, 3, K)",
    )
    parser.add_argument(
        "--only-suit", dest="steps", action="append", type=_step("only_suits"),
        metavar="SUIT", help="Keep only cards of SUIT",
    )
    parser.add_argument(
        "--sort", dest="steps", action="append", type=_step("sort"),
        metavar="{default,rank}", help="Re-sort the deck at this point",
    )
    parser.add_argument("--shuffle", action="store_true", help="Shuffle the finished deck")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for deterministic shuffles")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else LOG_LEVEL)

    try:
        config = load_config(args.config) if args.config else DeckConfig()
        config.steps.extend(args.steps or [])
        if args.shuffle:
            config.shuffle = True
        if args.seed is not None:
            config.seed = args.seed
        cards = build_from_config(config)
    except OSError as exc:  # pragma: no cover - CLI concerns
        raise SystemExit(f"Failed to read config: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Failed to parse config: {exc}") from exc
    except (DeckOptionError, DeckConfigError) as exc:
        raise SystemExit(str(exc)) from exc

    for card in cards:
        print(card_label(card))
    print(f"[deck] {len(cards)} cards", file=sys.stderr)


if __name__ == "__main__":
    main()
