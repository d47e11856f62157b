#!/usr/bin/env python3
"""
Module: dateprefix.__main__

Command-line entry point:
    python -m dateprefix DIRECTORY [--apply]

Lists the files of DIRECTORY, shows the planned `YYYYMMDD-<name>` renames
and, with --apply, performs them.

Exit status: 0 on success, 1 when analysis or any rename failed, 2 when
DIRECTORY is not a folder.
"""

import argparse
import os
import sys

from dateprefix.config import APP_NAME, APP_VERSION
from dateprefix.core.rename.data_classes import RenamePlan
from dateprefix.core.session import RenameSession
from dateprefix.services.filesystem_service import FilesystemService
from dateprefix.utils.logging.logger_factory import get_cached_logger
from dateprefix.utils.logging.logger_setup import ConfigureLogger

logger = get_cached_logger(__name__)

UNRESOLVED_LABEL = "<unresolved>"


def get_user_config_dir(app_name: str = APP_NAME) -> str:
    """Per-user configuration folder, used for log files."""
    if os.name == "nt":
        base_dir = os.environ.get("APPDATA", os.path.expanduser("~"))
    else:
        base_dir = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(base_dir, app_name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Prefix filenames with their original creation date (YYYYMMDD-).",
    )
    parser.add_argument("directory", help="folder whose files are renamed (not recursive)")
    parser.add_argument(
        "--apply", action="store_true", help="perform the renames instead of only listing them"
    )
    parser.add_argument(
        "--include-hidden", action="store_true", help="also rename files starting with a dot"
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="folder for error logs (default: <user config dir>/logs)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def format_plan(plan: RenamePlan) -> list[str]:
    """From/To table lines for `plan`."""
    if not len(plan):
        return ["(no files)"]

    width = max(len("From"), *(len(entry.original_name) for entry in plan))
    lines = [f"{'From':<{width}}  To"]
    for entry in plan:
        target = entry.target_name if entry.target_name is not None else UNRESOLVED_LABEL
        marker = "  (conflict, skipped)" if entry.is_conflict else ""
        lines.append(f"{entry.original_name:<{width}}  {target}{marker}")
    return lines


def _print_progress(processed: int, total: int, _name: str) -> None:
    end = "\n" if processed == total else ""
    print(f"\rRenaming... {processed} / {total}", end=end, flush=True)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    log_dir = args.log_dir or os.path.join(get_user_config_dir(), "logs")
    ConfigureLogger(
        log_name=APP_NAME,
        log_dir=log_dir,
        console_level="DEBUG" if args.verbose else "WARNING",
    )

    directory = os.path.abspath(args.directory)
    if not os.path.isdir(directory):
        print(f"{APP_NAME}: not a directory: {args.directory}", file=sys.stderr)
        return 2

    names = FilesystemService().list_entries(directory, skip_hidden=not args.include_hidden)
    session = RenameSession()

    print("Analysing...", flush=True)
    worker = session.start_analysis(directory, names)
    worker.wait()
    if session.plan is None:
        print(f"{APP_NAME}: analysis failed: {worker.error}", file=sys.stderr)
        return 1

    plan = session.plan
    for line in format_plan(plan):
        print(line)
    print(
        f"\n{plan.rename_count} to rename, {plan.unchanged_count} already named, "
        f"{plan.unresolved_count} unresolved, {plan.conflict_count} conflicts"
    )

    if not args.apply:
        if plan.has_changes:
            print("Dry run; pass --apply to rename.")
        return 0

    worker = session.start_rename(progress_callback=_print_progress)
    worker.wait()

    result = session.last_result
    if result is None:
        print(f"{APP_NAME}: rename failed: {worker.error}", file=sys.stderr)
        return 1

    for item in result.failed_items:
        print(f"Failed: {item.original_name} -> {item.target_name}: {item.error_message}")
    print(f"Renamed {result.success_count} files, {result.error_count} failed.")

    logger.info("[main] Renamed %d files in %s", result.success_count, directory)
    return 1 if result.error_count else 0


if __name__ == "__main__":
    sys.exit(main())
