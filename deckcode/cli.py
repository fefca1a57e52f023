"""
Command line interface for deck codes.

Usage:
    deckcode encode 0:1 1:3          # card id:copies pairs -> Z01ZZZ02
    deckcode decode Z01ZZZ02         # list the cards in a code
    deckcode edit Z01 add:4 remove:0 # apply commands, print the new code

All commands read the catalog from CATALOG_PATH (bundled sample by default).
"""

import argparse
import logging
import sys
from pathlib import Path

from deckcode.codec.deck_code import DecodeError
from deckcode.config import MAX_COPIES, settings
from deckcode.models.catalog import CardCatalog, CatalogError, UnknownCardError
from deckcode.models.deck import DeckEntry
from deckcode.parsers.catalog_loader import load_catalog
from deckcode.services.deck_state import DeckState

logger = logging.getLogger(__name__)


def _parse_pair(text: str) -> tuple[int, int]:
    card_id, sep, count = text.partition(":")
    try:
        return int(card_id), int(count) if sep else 1
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ID:COUNT, got {text!r}") from None


def _parse_command(text: str) -> tuple[str, int]:
    action, sep, card_id = text.partition(":")
    if action not in ("add", "remove") or not sep:
        raise argparse.ArgumentTypeError(f"expected add:ID or remove:ID, got {text!r}")
    try:
        return action, int(card_id)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected add:ID or remove:ID, got {text!r}") from None


def format_deck(state: DeckState) -> str:
    """Render a deck as a plain-text listing, one entry per line."""
    lines = [
        f"{e.count}x {e.card.name} [{e.card.type.value}] #{e.card.index}" for e in state.entries()
    ]
    lines.append(f"Total: {state.total_count()}")
    lines.append(f"Code: {state.code}")
    return "\n".join(lines)


def _encode(args: argparse.Namespace, catalog: CardCatalog) -> int:
    deck: dict[int, DeckEntry] = {}
    for card_id, count in args.entries:
        if not 1 <= count <= MAX_COPIES:
            print(f"Error: count for card {card_id} must be 1-{MAX_COPIES}", file=sys.stderr)
            return 1
        if card_id in deck:
            print(f"Error: card {card_id} is listed more than once", file=sys.stderr)
            return 1
        deck[card_id] = DeckEntry(card=catalog.lookup(card_id), count=count)

    print(DeckState(catalog, deck).code)
    return 0


def _decode(args: argparse.Namespace, catalog: CardCatalog) -> int:
    print(format_deck(DeckState.from_code(args.code.strip(), catalog)))
    return 0


def _edit(args: argparse.Namespace, catalog: CardCatalog) -> int:
    state = DeckState.from_code(args.code.strip(), catalog)
    for action, card_id in args.commands:
        if action == "add":
            state.add_card(card_id)
        else:
            state.remove_card(card_id)

    print(format_deck(state))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deckcode", description="Encode and decode deck codes")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Catalog JSON file (defaults to CATALOG_PATH)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Encode ID:COUNT pairs as a deck code")
    encode.add_argument("entries", nargs="*", type=_parse_pair, metavar="ID:COUNT")
    encode.set_defaults(handler=_encode)

    decode = subparsers.add_parser("decode", help="List the cards in a deck code")
    decode.add_argument("code")
    decode.set_defaults(handler=_decode)

    edit = subparsers.add_parser("edit", help="Apply add/remove commands to a deck code")
    edit.add_argument("code")
    edit.add_argument("commands", nargs="*", type=_parse_command, metavar="add:ID|remove:ID")
    edit.set_defaults(handler=_edit)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        catalog = load_catalog(args.catalog or settings.catalog_path)
        return args.handler(args, catalog)
    except (FileNotFoundError, CatalogError) as e:
        logger.error("Could not load catalog: %s", e)
        return 1
    except DecodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnknownCardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
