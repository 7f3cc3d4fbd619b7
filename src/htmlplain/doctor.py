"""Diagnostic tool for verifying htmlplain installation and parsers."""

import sys
from importlib import import_module
from typing import Optional

from rich.console import Console
from rich.table import Table

SMOKE_HTML = "<html><body><p>Hello <b>world</b></p></body></html>"
SMOKE_TEXT = "Hello world"


def check_dependency(
    module_name: str, package_name: Optional[str] = None, optional: bool = False
) -> tuple[bool, str]:
    """
    Check if a Python module is importable.

    Args:
        module_name: Name of the module to import
        package_name: Display name of the package (defaults to module_name)
        optional: Whether this is an optional dependency

    Returns:
        Tuple of (success: bool, message: str)
    """
    display_name = package_name or module_name

    try:
        import_module(module_name)
        return True, f"[OK] {display_name}"
    except ImportError:
        if optional:
            return False, f"[WARN] {display_name} (optional - not installed)"
        else:
            return False, f"[MISSING] {display_name}"


def check_parser(builder: str) -> tuple[bool, str]:
    """
    Run a small conversion through a BeautifulSoup tree builder.

    Returns:
        Tuple of (success: bool, message: str)
    """
    from bs4 import FeatureNotFound

    from .conversion import plain_text

    try:
        result = plain_text(SMOKE_HTML, parser=builder)
    except FeatureNotFound:
        return False, f"[WARN] Parser {builder} (optional - not installed)"

    if result != SMOKE_TEXT:
        return False, f"[FAIL] Parser {builder} - unexpected output {result!r}"
    return True, f"[OK] Parser {builder}"


def run_doctor(console: Optional[Console] = None) -> int:
    """
    Run diagnostic checks and display results.

    Args:
        console: Console to print to (a new stdout console if None)

    Returns:
        Exit code (0 if all core checks pass, 1 otherwise)
    """
    console = console or Console()
    console.print("Running htmlplain diagnostics...\n")

    core_checks = [
        ("bs4", "beautifulsoup4"),
        ("lxml", "lxml"),
        ("pydantic", "pydantic"),
        ("rich", "rich"),
        ("yaml", "pyyaml"),
    ]
    optional_checks = [
        ("html5lib", "html5lib", True),
    ]

    core_results = [check_dependency(mod, pkg) for mod, pkg in core_checks]
    optional_results = [check_dependency(mod, pkg, opt) for mod, pkg, opt in optional_checks]

    # Parser smoke tests need bs4 itself
    if core_results[0][0]:
        parser_results = [check_parser(builder) for builder in ("lxml", "html5lib", "html.parser")]
    else:
        parser_results = [(False, "[FAIL] Parsers - beautifulsoup4 is missing")]

    all_checks = {
        "Core Dependencies": core_results,
        "Optional Dependencies": optional_results,
        "Parsers": parser_results,
    }

    for category, results in all_checks.items():
        table = Table(title=category, show_header=False, box=None)
        table.add_column("Status", style="bold")

        for success, message in results:
            style = "green" if success else ("yellow" if "optional" in message else "red")
            table.add_row(message, style=style)

        console.print(table)
        console.print()

    core_failed = any(not success for success, _ in core_results)
    parser_failed = any(message.startswith("[FAIL]") for _, message in parser_results)

    if core_failed or parser_failed:
        console.print("\nWARNING: Some core checks failed!", markup=False)
        console.print("\nRecommended fixes:", markup=False)
        console.print("  1. For pip users: pip install --upgrade --force-reinstall htmlplain", markup=False)
        console.print("  2. For development: pip install -e .[dev]", markup=False)
        return 1

    console.print("\nAll core dependencies installed correctly!", markup=False)

    optional_missing = [msg for success, msg in optional_results if not success]
    if optional_missing:
        console.print("\nOptional features available:", markup=False)
        console.print("  - html5lib parser: pip install htmlplain[html5lib]", markup=False)

    return 0


if __name__ == "__main__":
    sys.exit(run_doctor())
