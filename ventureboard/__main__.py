"""Command-line entry point.

Usage:
    python -m ventureboard status
    python -m ventureboard add --title "Register domain" --priority high
    python -m ventureboard complete --task-id 1a2b3c4d
    python -m ventureboard add-business --business "Acme Labs" --business-priority primary
"""

import argparse
import logging
import sys
from pathlib import Path

from ventureboard.core.config import settings
from ventureboard.core.errors import StorageError, classify_error_with_response
from ventureboard.core.logging import configure_logging
from ventureboard.core.store import JsonFileStore
from ventureboard.modules.checklist.engine import ChecklistEngine
from ventureboard.modules.checklist.facade import VALID_ACTIONS, ChecklistFacade


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ventureboard", description="Track businesses as staged checklists")
    parser.add_argument("action", choices=VALID_ACTIONS, help="Checklist action to run")
    parser.add_argument("--business", dest="business_name", help="Business name or short name")
    parser.add_argument("--business-id", help="Business ID")
    parser.add_argument("--task-id", help="Task ID or unique ID prefix")
    parser.add_argument("--stage", help="Stage (idea, launch, growth, mature, sunset)")
    parser.add_argument("--category", help="Category ID")
    parser.add_argument("--title", help="Title of a task to add")
    parser.add_argument("--description", help="Description of a task to add")
    parser.add_argument("--priority", help="Task priority (critical, high, medium, low)")
    parser.add_argument("--business-priority", help="Business priority (primary, secondary, supporting, passive)")
    parser.add_argument("--domain", help="Web domain of a business to add")
    parser.add_argument("--short-name", help="Short name of a business to add")
    parser.add_argument("--status", help="Status filter (pending, in_progress, completed, skipped)")
    parser.add_argument(
        "--path",
        type=str,
        default=None,
        help="Path to checklist file (default: uses settings.checklist_path)",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: settings.log_level)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one checklist command and print its response.

    Returns:
        0 once a command has run, 1 if the checklist could not be loaded
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    path = Path(args.path).expanduser() if args.path else settings.checklist_file
    try:
        engine = ChecklistEngine(JsonFileStore(path))
    except StorageError as e:
        logger.error("Failed to load checklist", extra={"path": str(path), "error": str(e)})
        response = classify_error_with_response(e)
        sys.stderr.write(f"❌ {response.message}\n{response.suggestion}\n")
        return 1

    command = {
        key: value
        for key, value in vars(args).items()
        if key not in {"path", "log_level"} and value is not None
    }
    sys.stdout.write(ChecklistFacade(engine).execute(command) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
