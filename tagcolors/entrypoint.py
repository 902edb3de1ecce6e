"""Command-line report of the tag color configuration.

Prints where the `.swift-testing` directory was found and which tag colors
would be handed to the recorder. Never writes anything.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from .core.diagnostics import collect_report, format_report_text


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging.

    If callers already configured logging handlers, we don't override them.
    """

    if logging.getLogger().handlers:
        return

    level = logging.DEBUG if os.environ.get("TAGCOLORS_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tagcolors", description="Show the tag colors a test run would use.")
    parser.add_argument("--directory", help="Read tag-colors.json from this directory instead")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    try:
        configure_logging()

        report = collect_report(args.directory)
        if args.json:
            print(json.dumps(report.to_dict(), indent=2, sort_keys=True))
        else:
            print(format_report_text(report))

    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as exc:
        logger.exception("Unhandled error: %s", exc)
        sys.exit(1)

    sys.exit(0)
