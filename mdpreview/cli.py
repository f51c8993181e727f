"""
Command Line Interface
======================

    mdpreview -file README.md [-t template.html] [-s]

On success the absolute path of the staged HTML file is the only line
written to stdout. Errors go to stderr with a non-zero exit status.
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from mdpreview import __version__
from mdpreview.config.logging import get_logger, setup_logging
from mdpreview.config.settings import get_settings
from mdpreview.core.exceptions import PreviewToolError
from mdpreview.core.service import PreviewService

EXIT_OK = 0
EXIT_FAILURE = 1

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mdpreview", description="Preview a Markdown file as HTML"
    )
    parser.add_argument("-file", dest="file", default="", help="Markdown file to preview")
    parser.add_argument("-t", dest="template", default="", help="Alternate template name")
    parser.add_argument(
        "-s", dest="skip_preview", action="store_true", help="Skip auto-preview"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, generate the preview and return an exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.file:
        parser.print_usage(sys.stderr)
        return EXIT_FAILURE

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_FAILURE
    setup_logging(settings)

    service = PreviewService.from_settings(settings, out=sys.stdout)
    try:
        service.generate_preview(args.file, args.template, args.skip_preview)
    except PreviewToolError as e:
        logger.debug("Preview failed", error_type=type(e).__name__)
        print(e, file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
