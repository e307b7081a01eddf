"""CLI commands for G2G Lister."""

import argparse
import json
import sys
from dataclasses import asdict
from typing import Optional

from g2glister.config.logging import get_logger, setup_logging
from g2glister.config.preferences import load_preferences, update_preference
from g2glister.config.settings import USAGE_STORES, Settings
from g2glister.core.errors import NoReadableContentError
from g2glister.core.listing import autofill_listing
from g2glister.core.models import ListingForm
from g2glister.core.registry import AccountRegistry
from g2glister.core.usage_tracker import UsageTracker
from g2glister.db.connection import Database
from g2glister.db.repository import Repository
from g2glister.db.usage_store import open_usage_store
from g2glister.parser.assembler import parse_account_data
from g2glister.parser.sources import list_account_files


def _load_settings(args: argparse.Namespace) -> Optional[Settings]:
    """Build settings from global arguments, printing errors if invalid."""
    settings = Settings.from_args(
        db_path=args.db,
        portable=args.portable,
        usage_store=args.usage_store,
        verbose=args.verbose,
    )
    errors = settings.validate()
    if errors:
        for error in errors:
            print(f"Error: {error}")
        return None

    setup_logging(
        portable=args.portable,
        console=args.verbose or args.command == "serve",
        level=settings.log_level,
    )
    return settings


def _open_tracker(settings: Settings) -> tuple[Database, UsageTracker]:
    db = Database(settings.db_path)
    db.connect()
    store = open_usage_store(settings.usage_store, Repository(db), settings.usage_file)
    return db, UsageTracker(store)


def _resolve_flag(value: Optional[bool], default: bool) -> bool:
    return default if value is None else value


def _print_listing(listing: ListingForm) -> None:
    print(f"Title ({len(listing.title)} chars):")
    print(listing.title)
    print()
    print("Description:")
    print(listing.description)


def cmd_parse(args: argparse.Namespace) -> int:
    """Print the attributes extracted from one account folder."""
    settings = _load_settings(args)
    if settings is None:
        return 1

    try:
        files = list_account_files(args.folder)
        record = parse_account_data(args.folder, files)
    except (OSError, NoReadableContentError) as e:
        print(f"Error: {e}")
        return 1

    print(json.dumps(asdict(record), indent=2, ensure_ascii=False))
    return 0


def cmd_autofill(args: argparse.Namespace) -> int:
    """Generate the listing of one account folder."""
    settings = _load_settings(args)
    if settings is None:
        return 1

    try:
        files = list_account_files(args.folder)
    except OSError as e:
        print(f"Error: {e}")
        return 1

    prefs = load_preferences(settings.prefs_path)
    rank = _resolve_flag(args.rank, prefs.rank_by_scarcity)
    track = _resolve_flag(args.track, prefs.track_usage)

    db, tracker = _open_tracker(settings)
    try:
        try:
            listing = autofill_listing(args.folder, files, tracker=tracker if rank else None)
        except NoReadableContentError as e:
            print(f"Error: {e}")
            return 1

        _print_listing(listing)

        if track and not tracker.record(listing.featured_champions):
            print("Warning: Could not save champion usage statistics")
    finally:
        db.close()

    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    """Generate listings for every account folder of a base directory."""
    settings = _load_settings(args)
    if settings is None:
        return 1

    prefs = load_preferences(settings.prefs_path)
    base = args.base or prefs.last_folder_path
    if not base:
        print("Error: No accounts folder given and none remembered")
        return 1

    rank = _resolve_flag(args.rank, prefs.rank_by_scarcity)
    track = _resolve_flag(args.track, prefs.track_usage)

    update_preference("last_folder_path", base, settings.prefs_path)
    registry = AccountRegistry(last_selected_path=prefs.last_folder_path or "")
    result = registry.load_folders(base)
    print(result.message)
    if not result.success:
        return 1

    db, tracker = _open_tracker(settings)
    try:

        def autofill(path: str, files: list[str]) -> ListingForm:
            listing = autofill_listing(path, files, tracker=tracker if rank else None)
            if track:
                tracker.record(listing.featured_champions)
            return listing

        outcomes = registry.autofill_all(autofill)
    finally:
        db.close()

    print("-" * 60)
    for outcome in outcomes:
        if outcome.ok:
            print(f"  [{outcome.status.value}] {outcome.name}")
            print(f"      {outcome.listing.title}")
        else:
            print(f"  [{outcome.status.value}] {outcome.name}: {outcome.error}")
    print("-" * 60)

    failed = sum(1 for outcome in outcomes if not outcome.ok)
    print(f"Listed: {len(outcomes) - failed}, failed: {failed}")
    return 1 if failed else 0


def cmd_usage(args: argparse.Namespace) -> int:
    """Show or reset champion usage statistics."""
    settings = _load_settings(args)
    if settings is None:
        return 1

    db, tracker = _open_tracker(settings)
    try:
        if args.reset:
            tracker.reset()
            print("Usage statistics cleared")
            return 0

        stats = tracker.get_stats()
    finally:
        db.close()

    if not stats:
        print("No usage recorded")
        return 0

    print("Champion usage (least used first):")
    print("-" * 40)
    for name, count in stats[: args.limit] if args.limit else stats:
        print(f"  {count:>5} {name}")
    print("-" * 40)
    print(f"Total items: {len(stats)}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the local API server."""
    settings = _load_settings(args)
    if settings is None:
        return 1

    logger = get_logger()

    try:
        import uvicorn

        from g2glister.api.app import create_app
    except ImportError:
        logger.error("FastAPI and Uvicorn are required for the serve command.")
        logger.error("Install with: pip install fastapi uvicorn[standard]")
        return 1

    db = Database(settings.db_path)
    db.connect()
    logger.info(f"Database: {settings.db_path}")

    try:
        app = create_app(db, settings=settings)
        logger.info(f"Starting server on http://{args.host}:{args.port}")
        uvicorn.run(app, host=args.host, port=args.port, log_level="warning")
    finally:
        db.close()

    return 0


def _add_listing_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--rank",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Feature least-used champions and skins first (default: preference)",
    )
    parser.add_argument(
        "--track",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Record the champions featured in the title (default: preference)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="g2glister",
        description="Generate G2G marketplace listings from account text dumps",
    )
    parser.add_argument(
        "--db",
        type=str,
        help="Database file path",
    )
    parser.add_argument(
        "--portable",
        action="store_true",
        help="Use portable mode (data beside exe)",
    )
    parser.add_argument(
        "--usage-store",
        choices=USAGE_STORES,
        default=None,
        help="Where champion usage counters are kept (default: sqlite)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline diagnostics to the console",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Show attributes extracted from an account folder")
    parse_parser.add_argument("folder", type=str, help="Account folder")

    # autofill command
    autofill_parser = subparsers.add_parser("autofill", help="Generate the listing of one account")
    autofill_parser.add_argument("folder", type=str, help="Account folder")
    _add_listing_flags(autofill_parser)

    # batch command
    batch_parser = subparsers.add_parser("batch", help="Generate listings for every account folder")
    batch_parser.add_argument(
        "base",
        type=str,
        nargs="?",
        help="Folder holding one subfolder per account (default: last used)",
    )
    _add_listing_flags(batch_parser)

    # usage command
    usage_parser = subparsers.add_parser("usage", help="Show champion usage statistics")
    usage_parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear all usage counters",
    )
    usage_parser.add_argument(
        "--limit",
        type=int,
        default=0,
        help="Number of entries to show (default: all)",
    )

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start the local API server")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run server on (default: 8000)",
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "parse": cmd_parse,
        "autofill": cmd_autofill,
        "batch": cmd_batch,
        "usage": cmd_usage,
        "serve": cmd_serve,
    }

    cmd_func = commands.get(args.command)
    if cmd_func is None:
        print(f"Unknown command: {args.command}")
        return 1

    return cmd_func(args)


if __name__ == "__main__":
    sys.exit(main())
