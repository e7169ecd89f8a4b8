"""Command-line interface for mail-fts.

This module provides maintenance commands for the full-text index: indexing a
document exported by the mail store and purging documents of an account.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

from mail_fts import __version__
from mail_fts.backend import create_backend
from mail_fts.config import Settings, get_settings
from mail_fts.exceptions import ConfigurationError, MailFtsError
from mail_fts.models import Collection, FtsDocument, IdSet
from mail_fts.store import FullTextStore
from mail_fts.utils import configure_logging

logger = structlog.get_logger()


def _collection_arg(value: str) -> Collection:
    try:
        return Collection.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mail-fts", description="Mail full-text index maintenance")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    index_parser = subparsers.add_parser("index", help="Index a document exported as JSON")
    index_parser.add_argument(
        "file",
        type=Path,
        help="JSON file with account_id, collection, document_id and parts",
    )

    remove_parser = subparsers.add_parser("remove", help="Remove documents of an account")
    remove_parser.add_argument("--account", type=int, required=True, help="Account id")
    remove_parser.add_argument(
        "--collection",
        type=_collection_arg,
        default=Collection.EMAIL,
        help="Collection name or number (default: email)",
    )
    remove_parser.add_argument("document_ids", nargs="*", type=int, help="Document ids to remove")

    remove_all_parser = subparsers.add_parser(
        "remove-all",
        help="Remove every document of an account from all collections",
    )
    remove_all_parser.add_argument("--account", type=int, required=True, help="Account id")

    return parser


async def _cmd_index(store: FullTextStore, args: argparse.Namespace) -> int:
    try:
        document = FtsDocument.model_validate_json(args.file.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        logger.error("index_document_invalid", file=str(args.file), error=str(exc))
        return 2

    await store.index_document(document)
    print(
        f"Indexed document {document.document_id} of account {document.account_id} "
        f"into {store.index_name(document.collection)}"
    )
    return 0


async def _cmd_remove(store: FullTextStore, args: argparse.Namespace) -> int:
    try:
        document_ids = IdSet(args.document_ids)
    except ValueError as exc:
        logger.error("remove_invalid_ids", error=str(exc))
        return 2

    await store.remove(args.account, args.collection, document_ids)
    print(
        f"Removed {len(document_ids)} document id(s) of account {args.account} "
        f"from {store.index_name(args.collection)}"
    )
    return 0


async def _cmd_remove_all(store: FullTextStore, args: argparse.Namespace) -> int:
    await store.remove_all(args.account)
    print(f"Removed all documents of account {args.account}")
    return 0


_COMMANDS = {
    "index": _cmd_index,
    "remove": _cmd_remove,
    "remove-all": _cmd_remove_all,
}


async def _run(settings: Settings, args: argparse.Namespace) -> int:
    async with FullTextStore(create_backend(settings), settings) as store:
        try:
            return await _COMMANDS[args.command](store, args)
        except MailFtsError as exc:
            logger.error("command_failed", command=args.command, error=str(exc))
            return 1
        except ValueError as exc:
            logger.error("command_invalid_arguments", command=args.command, error=str(exc))
            return 2


def main(args: list[str] | None = None) -> int:
    """Main entry point for the mail-fts CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, 1 for backend failures, 2 for usage errors).
    """
    if args is None:
        args = sys.argv[1:]

    parser = _build_parser()
    parsed = parser.parse_args(args)

    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level, debug=settings.debug)
    logger.info("mail_fts_started", version=__version__, command=parsed.command)

    try:
        return asyncio.run(_run(settings, parsed))
    except ConfigurationError as exc:
        logger.error("invalid_configuration", error=str(exc))
        return 2
    except MailFtsError as exc:
        logger.error("command_failed", command=parsed.command, error=str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
