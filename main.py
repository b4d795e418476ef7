#!/usr/bin/env python3
"""
Main entry point for component member ordering checks.

Usage:
    sort-comp [path]
    python3 -m sort_comp.main [path] --config .sort-comp.json
"""

import sys
import argparse

from .checker import SortCompChecker
from .reporter import SortCompReporter
from .rules import ConfigurationError


def main(argv=None):
    """Main entry point for component member ordering checks."""
    parser = argparse.ArgumentParser(description="Check that React component members are declared in the configured order")
    parser.add_argument('target_path', nargs='?', default='src', help='Target file or directory to check (default: src)')
    parser.add_argument('--config', '-c', default=None, help='Configuration file (default: closest .sort-comp.json)')
    parser.add_argument('--format', choices=['console', 'json'], default='console', help='Output format')
    parser.add_argument('--output', '-o', default='test-results/sort-comp-check.json', help='Output file for detailed JSON report')

    args = parser.parse_args(argv)

    try:
        checker = SortCompChecker(args.target_path, config_file=args.config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    results = checker.run_all_checks()

    reporter = SortCompReporter(args.output)
    success = reporter.report_results(results, format_type=args.format)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
