from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

from .bootstrap import configure_logging
from .data import KeyValueStore, MemoryStore
from .domain import Event, parse_date
from .services import ServiceContext, ViewController

logger = logging.getLogger(__name__)


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="datebook", description="Datebook calendar command line interface.")
    parser.add_argument("--storage", type=Path, default=None, help="Storage file to use instead of the default.")
    parser.add_argument(
        "--ephemeral",
        action="store_true",
        help="Keep events in memory only; nothing is read from or written to disk.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("gui", help="Launch the desktop calendar.")

    list_parser = subparsers.add_parser("list", help="List events, optionally for one date or matching a search.")
    list_parser.add_argument("--date", type=_iso_date, default=None)
    list_parser.add_argument("--search", default="")

    add_parser = subparsers.add_parser("add", help="Add an event on a date.")
    add_parser.add_argument("--date", type=_iso_date, required=True)
    add_parser.add_argument("--name", required=True)
    add_parser.add_argument("--start", required=True, help="Start time, HH:MM.")
    add_parser.add_argument("--end", required=True, help="End time, HH:MM.")
    add_parser.add_argument("--desc", default="")

    edit_parser = subparsers.add_parser("edit", help="Change an event's name, times or description.")
    edit_parser.add_argument("event_id")
    edit_parser.add_argument("--name")
    edit_parser.add_argument("--start")
    edit_parser.add_argument("--end")
    edit_parser.add_argument("--desc")

    delete_parser = subparsers.add_parser("delete", help="Delete an event.")
    delete_parser.add_argument("event_id")

    return parser


def format_event(event: Event) -> str:
    line = f"{event.id}  {event.date}  {event.start_time}-{event.end_time}  {event.name}"
    if event.desc:
        line += f"  ({event.desc})"
    return line


def _print_events(events: Iterable[Event], empty_message: str) -> None:
    rendered = [format_event(event) for event in events]
    print("\n".join(rendered) if rendered else empty_message)


def _report(controller: ViewController) -> int:
    print(controller.error, file=sys.stderr)
    return 1


def _add(controller: ViewController, args: argparse.Namespace) -> int:
    controller.select_date(args.date)
    controller.update_fields(name=args.name, start_time=args.start, end_time=args.end, desc=args.desc)
    before = {event.id for event in controller.store.events}
    if not controller.submit():
        return _report(controller)
    created = [event for event in controller.store.events if event.id not in before]
    for event in created:
        print(format_event(event))
    return 0


def _edit(controller: ViewController, args: argparse.Namespace) -> int:
    event = controller.store.get(args.event_id)
    if event is None:
        print(f"No event with id {args.event_id}", file=sys.stderr)
        return 1
    try:
        controller.selected_date = parse_date(event.date)
    except ValueError:
        # Dates written under another locale format; any selection will do for an edit.
        controller.selected_date = date.today()
    controller.begin_edit(event.id)
    changes = {
        "name": args.name,
        "start_time": args.start,
        "end_time": args.end,
        "desc": args.desc,
    }
    controller.update_fields(**{key: value for key, value in changes.items() if value is not None})
    if not controller.submit():
        return _report(controller)
    updated = controller.store.get(event.id)
    if updated is not None:
        print(format_event(updated))
    return 0


def _delete(controller: ViewController, args: argparse.Namespace) -> int:
    if controller.store.get(args.event_id) is None:
        print(f"No event with id {args.event_id}", file=sys.stderr)
        return 1
    controller.delete(args.event_id)
    print(f"Deleted {args.event_id}")
    return 0


def _backend(args: argparse.Namespace) -> Optional[KeyValueStore]:
    return MemoryStore() if args.ephemeral else None


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)
    logger.debug("Datebook CLI starting: %s", args.command)

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui(storage_path=args.storage, backend=_backend(args))
        return 0

    context = ServiceContext(backend=_backend(args), storage_path=args.storage)
    controller = context.controller
    if controller.storage_warning:
        print(controller.storage_warning, file=sys.stderr)

    if args.command == "list":
        controller.set_search(args.search)
        controller.selected_date = args.date
        _print_events(controller.visible_events(), controller.empty_message)
        return 0
    if args.command == "add":
        return _add(controller, args)
    if args.command == "edit":
        return _edit(controller, args)
    if args.command == "delete":
        return _delete(controller, args)
    parser.print_help()  # pragma: no cover - argparse enforces choices
    return 2


if __name__ == "__main__":
    sys.exit(main())
