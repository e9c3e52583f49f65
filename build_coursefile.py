#!/usr/bin/env python3
"""
Course file builder: CLI entry point.

Stores uploaded section PDFs (with a generated cover page) in a subject
directory, and merges the stored sections into a single course file.

Usage::

    python build_coursefile.py cover upload.pdf uploads/CS301 --section 13
    python build_coursefile.py merge uploads/CS301 --code CS301 --name "Data Structures"
    python build_coursefile.py list uploads/CS301
    python build_coursefile.py remove uploads/CS301 --section 13

Verbosity levels::

    -v 0   Quiet: warnings and errors only.
    -v 1   Normal: one line per stored section or merge summary (default).
    -v 2   Debug: layout and page-copy detail.
"""

import argparse
import logging
import sys

from core.errors import CourseFileError
from coursefile.layout.title_page import CoverStyle
from coursefile.pipeline import CourseFileConfig, CourseFilePipeline
from coursefile.sections import SECTION_COUNT

logger = logging.getLogger("coursefile")

# Mapping from --verbose integer to logging level
_VERBOSITY_MAP = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


# ------------------------------------------------------------------
# Argument parsing
# ------------------------------------------------------------------


def _parse_section(value: str) -> int:
    """
    Parse a 1-based section number.

    Raises:
        argparse.ArgumentTypeError: On non-numeric input.
    """
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid section '{value}'. Use a number 1-{SECTION_COUNT}."
        )


def _add_common(p: argparse.ArgumentParser) -> None:
    """Options shared by every sub-command."""
    style = p.add_argument_group("cover style")
    style.add_argument(
        "--margin",
        type=float,
        default=64.0,
        metavar="PT",
        help="Horizontal title margin in points (default: 64)",
    )
    style.add_argument(
        "--cover-size",
        type=float,
        default=24.0,
        metavar="PT",
        help="Section cover font size (default: 24)",
    )
    style.add_argument(
        "--title-size",
        type=float,
        default=20.0,
        metavar="PT",
        help="Merged title page font size (default: 20)",
    )

    out = p.add_argument_group("output control")
    out.add_argument(
        "-v",
        "--verbose",
        type=int,
        choices=[0, 1, 2],
        default=1,
        help="Verbosity: 0=quiet, 1=normal (default), 2=debug",
    )
    out.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser with all sub-commands."""
    p = argparse.ArgumentParser(
        description="Assemble course files from per-section PDFs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  python build_coursefile.py cover upload.pdf uploads/CS301 --section 13\n"
            '  python build_coursefile.py merge uploads/CS301 --code CS301 --name "Data Structures"\n'
            "  python build_coursefile.py list uploads/CS301\n"
        ),
    )
    sub = p.add_subparsers(dest="command", required=True)

    # -- cover -------------------------------------------------------------
    cover = sub.add_parser("cover", help="Add a cover page and store a section PDF")
    cover.add_argument("input", help="Uploaded PDF file")
    cover.add_argument("subject_dir", help="Subject directory holding section-N.pdf files")
    cover.add_argument(
        "--section",
        type=_parse_section,
        required=True,
        metavar="N",
        help=f"Section number 1-{SECTION_COUNT} (out-of-range values are clamped)",
    )
    _add_common(cover)

    # -- merge -------------------------------------------------------------
    merge = sub.add_parser("merge", help="Merge stored sections into one PDF")
    merge.add_argument("subject_dir", help="Subject directory holding section-N.pdf files")
    merge.add_argument("--code", required=True, help="Subject code, e.g. CS301")
    merge.add_argument("--name", required=True, help="Subject name")
    merge.add_argument(
        "-o",
        "--output",
        default=None,
        metavar="PATH",
        help="Output PDF (default: SUBJECT_DIR/merged.pdf)",
    )
    _add_common(merge)

    # -- list --------------------------------------------------------------
    lst = sub.add_parser("list", help="List stored section PDFs")
    lst.add_argument("subject_dir", help="Subject directory")
    _add_common(lst)

    # -- remove ------------------------------------------------------------
    rm = sub.add_parser("remove", help="Delete a stored section PDF")
    rm.add_argument("subject_dir", help="Subject directory")
    rm.add_argument(
        "--section",
        type=_parse_section,
        required=True,
        metavar="N",
        help=f"Section number 1-{SECTION_COUNT}",
    )
    _add_common(rm)

    return p


# ------------------------------------------------------------------
# Logging setup
# ------------------------------------------------------------------


def _configure_logging(verbosity: int) -> None:
    """
    Set up the ``coursefile`` and ``core`` loggers.

    At DEBUG the format carries a timestamp and the module name; at INFO
    only the message is printed.
    """
    level = _VERBOSITY_MAP.get(verbosity, logging.INFO)

    if level <= logging.DEBUG:
        fmt = "%(asctime)s %(name)s %(levelname)s: %(message)s"
        datefmt = "%H:%M:%S"
    elif level <= logging.INFO:
        fmt = "%(message)s"
        datefmt = None
    else:
        fmt = "%(levelname)s: %(message)s"
        datefmt = None

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    for name in ("coursefile", "core"):
        log = logging.getLogger(name)
        log.setLevel(level)
        log.handlers.clear()
        log.addHandler(handler)


# ------------------------------------------------------------------
# Sub-commands
# ------------------------------------------------------------------


def _cmd_cover(pipeline: CourseFilePipeline, args: argparse.Namespace) -> None:
    result = pipeline.add_section(args.input, args.subject_dir, args.section)
    logger.info(
        "Section %d '%s': %d page(s) + cover -> %s",
        result.section,
        result.title,
        result.source_pages,
        result.output_path,
    )


def _cmd_merge(pipeline: CourseFilePipeline, args: argparse.Namespace) -> None:
    result = pipeline.merge(args.subject_dir, args.code, args.name, args.output)
    if not result.sections_present:
        logger.warning("No sections stored; merged file has a title page only")
    logger.info("\n%s", result.summary())


def _cmd_list(pipeline: CourseFilePipeline, args: argparse.Namespace) -> None:
    files = pipeline.list_sections(args.subject_dir)
    if not files:
        logger.info("No PDFs in %s", args.subject_dir)
        return
    # Listing is the command's output, not a log message
    for path in files:
        print(path.name)


def _cmd_remove(pipeline: CourseFilePipeline, args: argparse.Namespace) -> None:
    if not pipeline.remove_section(args.subject_dir, args.section):
        logger.error("Section %d not found in %s", args.section, args.subject_dir)
        sys.exit(1)


_COMMANDS = {
    "cover": _cmd_cover,
    "merge": _cmd_merge,
    "list": _cmd_list,
    "remove": _cmd_remove,
}


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------


def main(argv=None):
    """Parse arguments, configure logging, and run the sub-command."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Logging must be configured before any logger calls
    _configure_logging(args.verbose)

    config = CourseFileConfig(
        cover_style=CoverStyle(
            margin=args.margin,
            cover_font_size=args.cover_size,
            title_font_size=args.title_size,
        ),
        disable_tqdm=args.no_progress or args.verbose == 0,
    )
    pipeline = CourseFilePipeline(config)

    try:
        _COMMANDS[args.command](pipeline, args)
    except (CourseFileError, ValueError, OSError) as e:
        logger.error("Processing failed: %s", e)
        logger.debug("Failure detail", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
