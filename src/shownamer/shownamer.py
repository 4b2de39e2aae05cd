"""
Command-line entry point: normalize release-named episode files in a folder.

    shownamer "/media/Show Name" --name "Show Name" --recursive --dry-run
"""

import argparse
import atexit
import sys
from pathlib import Path

import showname as showname_module
from showname.rename import RenameSpec, rename_files
from showname.utils import LOG_FILE, LOG_LEVEL, MANIFEST_NAME, STATUS_LINKED, STATUS_RENAMED, LogLevel, logger


class _TeeStream:
    def __init__(self, *streams):
        self._streams = streams

    def write(self, data):
        for stream in self._streams:
            stream.write(data)
        return len(data)

    def flush(self):
        for stream in self._streams:
            stream.flush()

    def isatty(self):
        return any(getattr(stream, "isatty", lambda: False)() for stream in self._streams)


def _tee_to_file(log_file: str) -> Path:
    """Copy console output (log lines and summaries) into `log_file`."""
    log_path = Path(log_file).expanduser().resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handle = open(log_path, "a", encoding="utf-8", buffering=1)
    sys.stdout = _TeeStream(sys.stdout, handle)
    sys.stderr = _TeeStream(sys.stderr, handle)
    atexit.register(handle.close)
    return log_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shownamer",
        description="Rename release-named video files to 'Show Name - 05.mkv' or 'Show Name - S01E05.mkv'.",
        epilog='Example: shownamer "/media/Show Name" --name "Show Name" --season 1',
    )
    parser.add_argument("root", help="Folder containing the video files")
    parser.add_argument("--name", help="Replacement show name for every file")
    parser.add_argument("--season",
                        help="Season number for files whose names carry none (used verbatim, e.g. '1' or '01')")
    parser.add_argument("--recursive", action="store_true",
                        help="Walk subfolders; a 'Season N' folder name supplies the season for its files")
    parser.add_argument("--symlink", action="store_true", help="Create symbolic links instead of renaming")
    parser.add_argument("--link-dir", help="Folder for symbolic links (default: beside each source file)")
    parser.add_argument("--no-manifest", action="store_true",
                        help=f"Do not record original names in '{MANIFEST_NAME}'")
    parser.add_argument("--manifest-name", default=MANIFEST_NAME,
                        help="Manifest filename inside ROOT (default: %(default)s or $SHOWNAMER_MANIFEST_NAME)")
    parser.add_argument("--dry-run", action="store_true", help="Show proposed renames without changing anything")
    parser.add_argument("--no-confirm", action="store_true", help="Skip confirmation prompt")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--log-file",
                        help="Also write console output to this file (default: $SHOWNAMER_LOG_FILE)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {showname_module.__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    log_file = args.log_file or LOG_FILE
    if log_file:
        print(f"Logging to: {_tee_to_file(log_file)}")

    if args.debug:
        logger.set_log_level(LogLevel.DEBUG)
    else:
        try:
            logger.set_log_level(LogLevel.from_name(LOG_LEVEL))
        except ValueError as e:
            logger.log("startup.config", LogLevel.WARN, msg=str(e), fallback=LogLevel.INFO.name)
            logger.set_log_level(LogLevel.INFO)

    root_dir = Path(args.root).expanduser().resolve()
    if not root_dir.is_dir():
        logger.log("startup.error", LogLevel.ERROR, msg="Root directory does not exist", root=str(root_dir))
        return 2

    report = rename_files(
        root_dir,
        spec=RenameSpec(new_show_name=args.name, season_override=args.season),
        recursive=args.recursive,
        symlink=args.symlink,
        link_dir=Path(args.link_dir).expanduser().resolve() if args.link_dir else None,
        manifest=not args.no_manifest,
        manifest_name=args.manifest_name,
        dry_run=args.dry_run,
        confirm=not args.no_confirm,
    )

    for plan in report.failed:
        logger.safe_print(f"❌ Failed to rename {plan.source}: {plan.reason}")
    if report.failed:
        return 1

    if report.with_status(STATUS_RENAMED, STATUS_LINKED):
        logger.safe_print("\n🎉 Finished renaming files.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
