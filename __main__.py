#!/usr/bin/env python3
"""
Numeric Edit - Locale-aware numeric input field
Entry Point Module
Handles dependency checking, argument parsing, and launching the sample window.
"""
import argparse
import sys
import time
import traceback
from pathlib import Path
from typing import Optional, List
def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Numeric Edit - Locale-aware numeric input field",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python .                        # Open the sample window
  python . --check-deps           # Check dependencies only
  python . --currency             # Show the currency symbol
  python . --system-locale        # Use the system locale separators
  python . --max-digits-before 6  # Limit integer digits
        """
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version="Numeric Edit 1.0.0"
    )
    parser.add_argument(
        "--check-deps", "-c",
        action="store_true",
        help="Check dependencies and exit"
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Force start even if dependencies are missing"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        help="Directory for log files (console only when omitted)"
    )
    parser.add_argument(
        "--max-digits-before",
        type=int,
        default=0,
        help="Maximum digits before the decimal separator (0 = unlimited)"
    )
    parser.add_argument(
        "--max-digits-after",
        type=int,
        default=2,
        help="Maximum digits after the decimal separator"
    )
    parser.add_argument(
        "--currency",
        action="store_true",
        help="Show the currency symbol"
    )
    parser.add_argument(
        "--currency-symbol",
        type=str,
        help="Override the locale currency symbol (first character only)"
    )
    parser.add_argument(
        "--system-locale",
        action="store_true",
        help="Take separators and currency placement from the system locale"
    )
    return parser.parse_args(argv)
def check_dependencies() -> bool:
    """Check if required dependencies are available."""
    required_packages = {
        'PySide6': ('PySide6', 'GUI framework'),
    }
    missing_required = []
    print(f"Python version: {sys.version}")
    print(f"Python executable: {sys.executable}\n")
    for display_name, (import_name, description) in required_packages.items():
        try:
            module = __import__(import_name)
            if import_name == 'PySide6':
                from PySide6 import QtCore, QtWidgets, QtGui
            print(f"OK {display_name}: {description} (version: {getattr(module, '__version__', 'unknown')})")
        except ImportError as e:
            missing_required.append(f"{display_name} ({description})")
            print(f"ERROR {display_name}: {description} - MISSING")
            print(f"   Import error: {e}")
    if missing_required:
        print(f"\nMissing required dependencies:")
        for package in missing_required:
            print(f"   - {package}")
        print(f"\nTry installing with:")
        print(f"   python3 -m pip install " + " ".join(p.split()[0] for p in missing_required))
        return False
    return True
def setup_environment():
    """Make the modules next to this file importable."""
    current_dir = Path(__file__).parent
    if str(current_dir) not in sys.path:
        sys.path.insert(0, str(current_dir))
def resolve_conventions(use_system_locale: bool):
    """Resolve locale conventions once, before any field is built."""
    from format_config import LocaleConventions
    if not use_system_locale:
        return LocaleConventions()
    from numeric_line_edit import system_conventions
    return system_conventions()
def build_config(args: argparse.Namespace):
    """Build the field configuration from command line arguments."""
    from format_config import load_format_config
    attributes = {
        "max_digits_before_decimal": args.max_digits_before,
        "max_digits_after_decimal": args.max_digits_after,
        "show_currency_symbol": args.currency,
        "override_currency_symbol": args.currency_symbol,
    }
    return load_format_config(attributes, resolve_conventions(args.system_locale))
def main(argv: Optional[List[str]] = None):
    """Main entry point for the Numeric Edit sample."""
    args = None
    try:
        args = parse_arguments(argv)
        print("\n" + "="*60)
        print("Numeric Edit - Locale-aware numeric input field")
        print("="*60 + "\n")
        setup_environment()
        print("Checking dependencies...")
        deps_ok = check_dependencies()
        if args.check_deps:
            if deps_ok:
                print("\nAll dependencies are satisfied!")
                return 0
            else:
                print("\nSome dependencies are missing!")
                return 1
        if not args.force and not deps_ok:
            print("\nCannot start application due to missing dependencies.")
            print("Use --force to attempt startup anyway, or install missing packages.")
            return 1
        from format_config import FormatConfigError
        from logger import LogCategory, setup_logger
        logger = setup_logger(log_dir=Path(args.log_dir) if args.log_dir else None)
        if args.debug:
            logger.set_log_level("DEBUG")
        try:
            config = build_config(args)
        except FormatConfigError as e:
            logger.error(
                "Invalid format configuration",
                category=LogCategory.CONFIG,
                fields=[issue.field for issue in e.issues],
            )
            for issue in e.issues:
                print(f"ERROR {issue.field}: {issue.title} - {issue.message}")
            return 2
        logger.info("Starting sample window", category=LogCategory.SYSTEM, config=config)
        from sample_window import run_sample
        return run_sample(config)
    except KeyboardInterrupt:
        print("\n\nApplication interrupted by user")
        return 130
    except Exception as e:
        print(f"\nCritical error starting Numeric Edit:")
        print(f"   {type(e).__name__}: {e}")
        if args is not None and args.debug:
            print(f"\nDebug traceback:")
            traceback.print_exc()
        else:
            print(f"\nRun with --debug for detailed error information")
        return 1
if __name__ == "__main__":
    start_time = time.time()
    exit_code = main()
    print(f"\nNumeric Edit ran for {time.time() - start_time:.2f} seconds")
    sys.exit(exit_code)
