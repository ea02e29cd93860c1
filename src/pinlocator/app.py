"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pinlocator.ui.i18n import LANGUAGES, set_language


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pinlocator",
        description="Locate ICT test points and nets on a board map.",
    )
    parser.add_argument("file", nargs="?", type=Path, help="nail file to open")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument(
        "--language", default="English", choices=LANGUAGES, help="UI language"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Launch the PinLocator application."""
    from pinlocator.ui.bootstrap import run_application, setup_logging

    args = _build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO)
    set_language(args.language)

    sys.exit(run_application([sys.argv[0]], initial_file=args.file))


if __name__ == "__main__":
    main()
