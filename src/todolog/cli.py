"""CLI entry point for the todo log.

Usage:
    todolog init [PATH]
    todolog parse PATH
    todolog add "Buy milk" --section Errands [--file PATH]
    todolog show [--file PATH]
"""

import argparse
import logging
import sys
from pathlib import Path

from todolog import clock
from todolog.config import get_settings
from todolog.errors import TodoError
from todolog.models import SaveOutcome
from todolog.todo import Todo

logger = logging.getLogger("todolog.cli")


def _report_save(outcome: SaveOutcome, path: Path) -> None:
    if outcome is SaveOutcome.UP_TO_DATE:
        logger.info("Nothing to do: %s is already up to date", path)
    else:
        logger.info("Saved %s", path)


def cmd_init(args: argparse.Namespace) -> None:
    today = clock.today()
    todo = Todo.new(args.path, today=today)
    todo.advance(today=today)
    _report_save(todo.save(today=today), todo.file_path)


def cmd_parse(args: argparse.Namespace) -> None:
    todo = Todo.load(args.path, today=clock.today())
    last = todo.last_day()
    latest = last.date.isoformat() if last else "none"
    print(f"{args.path}: {len(todo.days)} days, latest {latest}")


def cmd_add(args: argparse.Namespace) -> None:
    settings = get_settings()
    today = clock.today()
    todo = Todo.new(args.file or settings.todo_file, today=today)
    section = args.section or settings.default_section
    todo.add(args.text, section, today=today)
    _report_save(todo.save(today=today), todo.file_path)


def cmd_show(args: argparse.Namespace) -> None:
    path = args.file or get_settings().todo_file
    todo = Todo.load(path, today=clock.today())
    sys.stdout.write(todo.serialize())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todolog", description="Plain-text daily todo log")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init", help="Create a new todo file and start today")
    init.add_argument("path", nargs="?", type=Path, default=None, help="File to create")
    init.set_defaults(func=cmd_init)

    parse = sub.add_parser("parse", help="Load and validate an existing todo file")
    parse.add_argument("path", type=Path)
    parse.set_defaults(func=cmd_parse)

    add = sub.add_parser("add", help="Add a task to today")
    add.add_argument("text", help="Task text, with or without the leading '-'")
    add.add_argument("--section", "-s", default=None, help="Section name (default: from config)")
    add.add_argument("--file", "-f", type=Path, default=None, help="Todo file (default: from config)")
    add.set_defaults(func=cmd_add)

    show = sub.add_parser("show", help="Print the todo file in canonical form")
    show.add_argument("--file", "-f", type=Path, default=None, help="Todo file (default: from config)")
    show.set_defaults(func=cmd_show)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or get_settings().debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        args.func(args)
    except (TodoError, OSError) as e:
        logger.error("%s: %s", type(e).__name__, e)
        sys.exit(1)


if __name__ == "__main__":
    main()
