"""
Shared helpers for member ordering tests.
"""

import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from sort_comp.checker import SortCompChecker
from sort_comp.models import MemberDescriptor, MemberKind, Severity
from sort_comp.utils.config import SortCompConfig


@contextmanager
def create_test_project(files: Dict[str, str]) -> Iterator[Path]:
    """Write fixture files into a temporary project and yield its root."""
    with tempfile.TemporaryDirectory() as tmp:
        project_path = Path(tmp)
        for relative_path, content in files.items():
            file_path = project_path / relative_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding='utf-8')
        yield project_path


def make_members(*names, kind: MemberKind = MemberKind.METHOD) -> List[MemberDescriptor]:
    """Build method descriptors in declaration order."""
    return [MemberDescriptor(name=name, position=i, kind=kind) for i, name in enumerate(names)]


def check_code(code: str, order: Optional[List[str]] = None,
               groups: Optional[Dict[str, List[str]]] = None) -> List[str]:
    """Check a source snippet and return the ordering error messages."""
    checker = SortCompChecker(config=SortCompConfig(order=order or [], groups=groups or {}))
    return [error.message for error in checker.check_source(code) if error.severity == Severity.ERROR]
