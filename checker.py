#!/usr/bin/env python3
"""
Main member ordering checker orchestration.

Resolves the ordering configuration once, discovers source files, and runs
the ordering rule on every component definition found.
"""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional, Tuple

from .models import CheckResults, LintError
from .rules import OrderResolver, SortCompRuleChecker
from .utils import FileCache, SortCompConfig, find_component_files, load_config_for


class SortCompChecker:
    """Main checker that orchestrates member ordering checks."""

    def __init__(self, target_path: str = "src", config: Optional[SortCompConfig] = None,
                 config_file: Optional[str] = None):
        self.target_path = Path(target_path)
        self.file_cache = FileCache()

        if config is None:
            config = load_config_for(self.target_path, Path(config_file) if config_file else None)
        self.config = config

        # Resolution errors surface here, before any file is read
        self.resolver = OrderResolver()
        self.order = self.resolver.resolve(config.order, config.groups)
        self.rule_checker = SortCompRuleChecker(self.order)

    def run_all_checks(self) -> CheckResults:
        """Run member ordering checks on every source file and return results."""
        start_time = time.time()
        results = CheckResults(target_path=str(self.target_path))

        files = find_component_files(self.target_path)
        results.files_checked = len(files)

        file_results: List[Tuple[Path, int, List[LintError]]] = []
        with ThreadPoolExecutor(max_workers=4) as executor:
            futures = {
                executor.submit(self._check_single_file, file_path): file_path
                for file_path in files
            }
            for future in as_completed(futures):
                file_results.append(future.result())

        # Report in a stable file order regardless of completion order
        for _, component_count, errors in sorted(file_results, key=lambda r: str(r[0])):
            results.components_checked += component_count
            for error in errors:
                results.add_error(error)

        results.execution_time = time.time() - start_time
        return results

    def check_source(self, content: str, file_path: str = "<source>") -> List[LintError]:
        """Check components in a source string."""
        components = self.file_cache.parser.find_components(content, Path(file_path))
        return self.rule_checker.check_components(components, file_path)

    def _check_single_file(self, file_path: Path) -> Tuple[Path, int, List[LintError]]:
        """Check a single file, returning its component count and errors."""
        components = self.file_cache.get_components(file_path)
        relative_path = self._relative_path(file_path)
        return file_path, len(components), self.rule_checker.check_components(components, relative_path)

    def _relative_path(self, file_path: Path) -> str:
        base = self.target_path if self.target_path.is_dir() else self.target_path.parent
        try:
            return str(file_path.relative_to(base))
        except ValueError:
            return str(file_path)
