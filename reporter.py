#!/usr/bin/env python3
"""
Member ordering check reporting module.

Handles result reporting, JSON output generation, and console summaries.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List

from .models import CheckResults, LintError, Severity


class SortCompReporter:
    """Handles reporting of member ordering check results."""

    def __init__(self, output_file: str = "test-results/sort-comp-check.json"):
        self.output_file = Path(output_file)

    def report_results(self, results: CheckResults, format_type: str = "console") -> bool:
        """Report results to both JSON file and console. Returns True if no errors."""
        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        self._write_json_report(results)

        if format_type == "json":
            self._display_json_output(results)
        else:
            self._display_console_summary(results)

        return not results.has_errors()

    # ------------------------------------------------------------------
    # JSON report
    # ------------------------------------------------------------------

    def _build_report(self, results: CheckResults) -> Dict:
        report_data = results.to_dict()
        report_data["timestamp"] = datetime.now().isoformat()
        return report_data

    def _write_json_report(self, results: CheckResults) -> None:
        """Write detailed JSON report to file."""
        with open(self.output_file, 'w') as f:
            json.dump(self._build_report(results), f, indent=2, default=str)

    def _display_json_output(self, results: CheckResults) -> None:
        """Display results in JSON format."""
        print(json.dumps(self._build_report(results), indent=2, default=str))

    # ------------------------------------------------------------------
    # Console summary
    # ------------------------------------------------------------------

    def _display_console_summary(self, results: CheckResults) -> None:
        """Display violations grouped by file, then a short summary."""
        total_errors = len(results.errors)
        total_warnings = len(results.warnings)

        if total_errors == 0 and total_warnings == 0:
            print(f"Component order check passed! "
                  f"({results.components_checked} components in {results.files_checked} files)")
            print(f"Detailed report: {self.output_file}")
            return

        by_file: Dict[str, List[LintError]] = {}
        for issue in results.get_all_issues():
            by_file.setdefault(issue.file_path or "<unknown>", []).append(issue)

        for file_path in sorted(by_file):
            print(file_path)
            issues = sorted(by_file[file_path], key=lambda issue: issue.line_number or 0)
            for issue in issues:
                severity = "error" if issue.severity == Severity.ERROR else "warning"
                line = issue.line_number or 0
                component = f" [{issue.component}]" if issue.component else ""
                print(f"  {line:>4}  {severity:<7}  {issue.message}{component}")
            print()

        print(f"Component order: {total_errors} errors, {total_warnings} warnings "
              f"in {len(by_file)} files")
        print(f"Detailed report: {self.output_file}")
