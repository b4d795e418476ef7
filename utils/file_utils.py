#!/usr/bin/env python3
"""
File utility functions for member ordering checks.

Handles file discovery, reading, and caching of parsed components.
"""

from pathlib import Path
from typing import Dict, List

from ..models import ComponentInfo
from ..shared.component_parser import ComponentParser


SOURCE_PATTERNS = ["*.js", "*.jsx", "*.ts", "*.tsx"]
SKIPPED_DIRECTORIES = {"node_modules", ".git", "dist", "build", "coverage"}


class FileCache:
    """Caches file contents and parsed components for performance."""

    def __init__(self):
        self.content_cache: Dict[Path, str] = {}
        self.component_cache: Dict[Path, List[ComponentInfo]] = {}
        self.parser = ComponentParser()

    def get_content(self, file_path: Path) -> str:
        """Get cached file content or load and cache it."""
        if file_path not in self.content_cache:
            self.content_cache[file_path] = get_file_content(file_path)
        return self.content_cache[file_path]

    def get_components(self, file_path: Path) -> List[ComponentInfo]:
        """Get cached components of a file or parse and cache them."""
        if file_path in self.component_cache:
            return self.component_cache[file_path]

        content = self.get_content(file_path)
        components = self.parser.find_components(content, file_path) if content else []
        self.component_cache[file_path] = components
        return components


def get_file_content(file_path: Path) -> str:
    """Get file content with error handling."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except (UnicodeDecodeError, OSError):
        return ""


def is_test_file(file_path: Path) -> bool:
    """Check if file is a test file."""
    name = file_path.name
    return ".test." in name or ".spec." in name or "__tests__" in file_path.parts


def is_declaration_file(file_path: Path) -> bool:
    """Check if file is a TypeScript declaration file."""
    return file_path.name.endswith(".d.ts")


def find_component_files(directory: Path) -> List[Path]:
    """Find all JavaScript/TypeScript source files that may define components."""
    if directory.is_file():
        return [directory]

    files = set()
    for pattern in SOURCE_PATTERNS:
        for source_file in directory.rglob(pattern):
            relative_parts = source_file.relative_to(directory).parts
            if any(part in SKIPPED_DIRECTORIES for part in relative_parts):
                continue
            if is_test_file(source_file) or is_declaration_file(source_file):
                continue
            files.add(source_file)

    return sorted(files)
