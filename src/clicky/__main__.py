"""CLI entry point for clicky."""

import argparse
import logging
from pathlib import Path

from .config import Settings
from .errors import ClickyError
from .logging import setup_logging
from .models import FieldUpdate
from .repositories import JsonBoardRepository
from .services import BoardService, CardService, MoveDirection

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="clicky",
        description="File-backed kanban board for the terminal",
    )
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Project root containing the .clicky directory (default: current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    init = subparsers.add_parser("init", help="Initialize a board in the project directory")
    init.add_argument("--name", default=None, help="Board name (default: directory name)")
    _add_interactive(init)

    create = subparsers.add_parser("create", help="Create a card")
    create.add_argument("title", nargs="?", help="Card title")
    create.add_argument("-d", "--description", default=None, help="Card description")
    create.add_argument("-a", "--assignee", default=None, help="Card assignee")
    create.add_argument("-c", "--column", default=None, help="Column ID (default: todo)")
    _add_interactive(create)

    move = subparsers.add_parser("move", help="Move a card to another column")
    move.add_argument("card_id", nargs="?", help="Card ID")
    move.add_argument("column", nargs="?", help="Target column ID")
    _add_interactive(move)

    show = subparsers.add_parser("show", help="Show card details")
    show.add_argument("card_id", nargs="?", help="Card ID")
    _add_interactive(show)

    list_ = subparsers.add_parser("list", help="List cards")
    list_.add_argument("-c", "--column", default=None, help="Only cards in this column")
    list_.add_argument("-a", "--assignee", default=None, help="Only cards with this assignee")
    _add_interactive(list_)

    update = subparsers.add_parser("update", help="Update a card")
    update.add_argument("card_id", nargs="?", help="Card ID")
    update.add_argument("-t", "--title", default=None, help="New title")
    description = update.add_mutually_exclusive_group()
    description.add_argument("-d", "--description", default=None, help="New description")
    description.add_argument(
        "--clear-description", action="store_true", help="Remove the description"
    )
    assignee = update.add_mutually_exclusive_group()
    assignee.add_argument("-a", "--assignee", default=None, help="New assignee")
    assignee.add_argument("--clear-assignee", action="store_true", help="Remove the assignee")
    _add_interactive(update)

    delete = subparsers.add_parser("delete", help="Delete a card")
    delete.add_argument("card_id", nargs="?", help="Card ID")
    delete.add_argument("-f", "--force", action="store_true", help="Skip confirmation")
    _add_interactive(delete)

    reorder = subparsers.add_parser("reorder", help="Move a card up or down within its column")
    reorder.add_argument("card_id", help="Card ID")
    reorder.add_argument("direction", choices=[d.value for d in MoveDirection], help="up or down")

    column = subparsers.add_parser("column", help="Add or remove columns")
    column_sub = column.add_subparsers(dest="column_command", metavar="ACTION")
    column_add = column_sub.add_parser("add", help="Add a column")
    column_add.add_argument("column_id", help="Column ID")
    column_add.add_argument("name", help="Display name")
    column_add.add_argument("--order", type=int, default=None, help="Display order (default: last)")
    column_remove = column_sub.add_parser("remove", help="Remove a column")
    column_remove.add_argument("column_id", help="Column ID")

    subparsers.add_parser("info", help="Show board information")
    subparsers.add_parser("tui", help="Open the terminal UI")

    return parser


def _add_interactive(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Prompt for the arguments",
    )


def _field_update(value: str | None, clear: bool) -> FieldUpdate:
    if clear:
        return FieldUpdate.clear()
    if value is not None:
        return FieldUpdate.set(value)
    return FieldUpdate.leave()


def _require(parser: argparse.ArgumentParser, args: argparse.Namespace, *names: str) -> None:
    """Error out when a positional needed outside interactive mode is missing."""
    missing = [name for name in names if getattr(args, name) is None]
    if missing:
        parser.error(f"{args.command}: missing {', '.join(missing)} (or use --interactive)")


def dispatch(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
    settings: Settings,
) -> int:
    """Run the selected subcommand and return its exit code."""
    from .cli import board as board_commands
    from .cli import card as card_commands
    from .cli import interactive

    base_path = settings.project_root
    repository = JsonBoardRepository(settings.board_dir, settings.board_file)
    board_service = BoardService(repository)
    card_service = CardService(board_service)

    command = args.command
    wizard = getattr(args, "interactive", False)

    if command == "init":
        if wizard:
            return interactive.init_wizard(base_path, board_service)
        return board_commands.run_init(base_path, board_service, args.name)

    if command == "info":
        return board_commands.run_info(base_path, board_service)

    if command == "column":
        if args.column_command == "add":
            return board_commands.run_column_add(
                base_path, board_service, args.column_id, args.name, args.order
            )
        if args.column_command == "remove":
            return board_commands.run_column_remove(base_path, board_service, args.column_id)
        parser.error("column: choose 'add' or 'remove'")

    if command == "create":
        if wizard:
            return interactive.create_wizard(base_path, card_service)
        _require(parser, args, "title")
        return card_commands.run_create(
            base_path, card_service, args.title, args.description, args.assignee, args.column
        )

    if command == "move":
        if wizard:
            return interactive.move_wizard(base_path, card_service)
        _require(parser, args, "card_id", "column")
        return card_commands.run_move(base_path, card_service, args.card_id, args.column)

    if command == "show":
        if wizard:
            return interactive.show_wizard(base_path, card_service)
        _require(parser, args, "card_id")
        return card_commands.run_show(base_path, card_service, args.card_id)

    if command == "list":
        if wizard:
            return interactive.list_wizard(base_path, card_service)
        return card_commands.run_list(base_path, card_service, args.column, args.assignee)

    if command == "update":
        if wizard:
            return interactive.update_wizard(base_path, card_service)
        _require(parser, args, "card_id")
        return card_commands.run_update(
            base_path,
            card_service,
            args.card_id,
            title=args.title,
            description=_field_update(args.description, args.clear_description),
            assignee=_field_update(args.assignee, args.clear_assignee),
        )

    if command == "delete":
        if wizard:
            return interactive.delete_wizard(base_path, card_service)
        _require(parser, args, "card_id")
        return card_commands.run_delete(base_path, card_service, args.card_id, args.force)

    if command == "reorder":
        return card_commands.run_reorder(
            base_path, card_service, args.card_id, MoveDirection(args.direction)
        )

    if command == "tui":
        # Import here so plain CLI commands do not load Textual
        from .app import run

        run(settings)
        return 0

    parser.print_help()
    return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.path:
        settings_kwargs["project_root"] = args.path
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    from .cli.output import error

    try:
        return dispatch(args, parser, settings)
    except ClickyError as e:
        logger.debug("Command %s failed: %s", args.command, e)
        error(str(e))
        return 1
    except (EOFError, KeyboardInterrupt):
        print()
        error("Cancelled")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
