"""Command-line interface for htmlplain."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from bs4 import FeatureNotFound
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .conversion import HtmlToPlainText
from .logging_config import setup_logging
from .models.config import HtmlPlainConfig

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="htmlplain",
        description="Convert HTML into a readable plain text approximation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a file
  htmlplain page.html

  # Read from stdin
  curl -s https://example.com | htmlplain

  # Drop link URLs and write to a file
  htmlplain page.html --no-links -o page.txt

  # Use settings from a YAML file
  htmlplain page.html --config htmlplain.yaml
        """,
    )

    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="HTML file to convert (default: stdin)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Run diagnostic checks",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="PATH",
        help="YAML configuration file",
    )

    # Conversion settings
    conversion_group = parser.add_argument_group("conversion settings")
    conversion_group.add_argument(
        "--no-links",
        action="store_true",
        help="Do not append URLs after link text",
    )
    conversion_group.add_argument(
        "--parser",
        choices=["lxml", "html5lib", "html.parser"],
        default=None,
        help="HTML parser to use (default: lxml)",
    )
    conversion_group.add_argument(
        "--encoding",
        default="utf-8",
        help="Input encoding for files and stdin (default: utf-8)",
    )

    # Output control
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write text to this file instead of stdout",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress log output",
    )

    return parser


def build_config(args: argparse.Namespace) -> HtmlPlainConfig:
    """Load the config file (if any) and apply command-line overrides."""
    config = HtmlPlainConfig.from_yaml_file(args.config) if args.config else HtmlPlainConfig()

    config_dict = config.model_dump()

    # Command-line flags win over the file
    if args.no_links:
        config_dict["conversion"]["show_links"] = False
    if args.parser:
        config_dict["conversion"]["parser"] = args.parser
    if args.verbose:
        config_dict["log_level"] = "DEBUG"
    elif args.quiet:
        config_dict["log_level"] = "ERROR"

    return HtmlPlainConfig.model_validate(config_dict)


def read_input(source: str, encoding: str) -> str:
    """Read HTML from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.buffer.read().decode(encoding)
    return Path(source).read_text(encoding=encoding)


def run_converter(args: argparse.Namespace) -> int:
    """Run the conversion with given arguments."""
    console = Console(stderr=True)

    try:
        config = build_config(args)
    except (ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}", highlight=False)
        return 1
    except OSError as e:
        console.print(f"[red]Error:[/red] Could not read config file: {escape(str(e))}", highlight=False)
        return 1

    setup_logging(
        level=config.log_level,
        log_file=str(config.log_file) if config.log_file else None,
        force=True,
    )

    try:
        html = read_input(args.file, args.encoding)
        converter = HtmlToPlainText(config.conversion)
        text = converter.convert(html)
    except (OSError, UnicodeDecodeError, LookupError, FeatureNotFound) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        if args.verbose:
            console.print_exception()
        return 1

    if text is None:
        logger.info("Document has no body, nothing to write")
        return 0

    if args.output:
        try:
            args.output.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error:[/red] Could not write output: {escape(str(e))}", highlight=False)
            return 1
        logger.info(f"Wrote {len(text)} characters to {args.output}")
    else:
        sys.stdout.write(text + "\n")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.doctor:
        from .doctor import run_doctor

        return run_doctor()

    return run_converter(args)


if __name__ == "__main__":
    sys.exit(main())
