#!/usr/bin/env python3
"""
Data models for component member ordering checks.

Contains the member descriptors consumed by the ordering engine, the
violations it produces, and the error/result structures used by the host
checker and reporter.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional


# Display form for members whose key is computed or cannot be resolved
UNKNOWN_NAME_DISPLAY = "[computed]"


class MemberKind(Enum):
    """Syntactic kind of a component member."""
    METHOD = "method"
    PROPERTY = "property"
    TYPE_ANNOTATION_PROPERTY = "type-annotation-property"
    SPREAD = "spread"


@dataclass(frozen=True)
class MemberDescriptor:
    """One declared member of a component definition.

    ``name`` is None when the key is computed or unresolvable; such a member
    never matches a name-based group.
    """
    name: Optional[str]
    position: int
    kind: MemberKind = MemberKind.METHOD
    is_static: bool = False
    line_number: Optional[int] = None

    @property
    def has_known_name(self) -> bool:
        return self.name is not None

    @property
    def display_name(self) -> str:
        return self.name if self.name is not None else UNKNOWN_NAME_DISPLAY


@dataclass(frozen=True)
class Violation:
    """``earlier_name`` (declared first) should be placed after ``later_name``."""
    earlier_name: Optional[str]
    earlier_position: int
    later_name: Optional[str]
    later_position: int
    earlier_line: Optional[int] = field(default=None, compare=False)
    later_line: Optional[int] = field(default=None, compare=False)

    @classmethod
    def between(cls, earlier: MemberDescriptor, later: MemberDescriptor) -> "Violation":
        return cls(
            earlier_name=earlier.name,
            earlier_position=earlier.position,
            later_name=later.name,
            later_position=later.position,
            earlier_line=earlier.line_number,
            later_line=later.line_number,
        )

    @property
    def message(self) -> str:
        earlier = self.earlier_name if self.earlier_name is not None else UNKNOWN_NAME_DISPLAY
        later = self.later_name if self.later_name is not None else UNKNOWN_NAME_DISPLAY
        return f"{earlier} should be placed after {later}"


@dataclass
class ComponentInfo:
    """A component definition found in a source file."""
    name: str
    kind: str  # 'object' or 'class'
    file_path: Path
    line_number: int
    node: Dict = field(default_factory=dict)
    skipped_lines: List[int] = field(default_factory=list)


class ErrorType(Enum):
    """Types of ordering errors."""
    MEMBER_ORDER = "member_order"
    UNPARSED_MEMBER = "unparsed_member"


class Severity(Enum):
    """Error severity levels."""
    ERROR = "error"
    WARNING = "warning"


@dataclass
class LintError:
    """Represents a member ordering error with reporting metadata."""
    message: str
    error_type: ErrorType
    severity: Severity = Severity.ERROR
    file_path: Optional[str] = None
    line_number: Optional[int] = None
    component: Optional[str] = None
    recommendation: Optional[str] = None
    metadata: Optional[Dict] = field(default_factory=dict)

    @classmethod
    def create_error(
        cls,
        message: str,
        error_type: ErrorType,
        file_path: Optional[str] = None,
        line_number: Optional[int] = None,
        component: Optional[str] = None,
        recommendation: Optional[str] = None,
        metadata: Optional[Dict] = None
    ) -> "LintError":
        """Create an error with ERROR severity."""
        return cls(
            message=message,
            error_type=error_type,
            severity=Severity.ERROR,
            file_path=file_path,
            line_number=line_number,
            component=component,
            recommendation=recommendation,
            metadata=metadata or {}
        )

    @classmethod
    def create_warning(
        cls,
        message: str,
        error_type: ErrorType,
        file_path: Optional[str] = None,
        line_number: Optional[int] = None,
        component: Optional[str] = None,
        recommendation: Optional[str] = None,
        metadata: Optional[Dict] = None
    ) -> "LintError":
        """Create an error with WARNING severity."""
        return cls(
            message=message,
            error_type=error_type,
            severity=Severity.WARNING,
            file_path=file_path,
            line_number=line_number,
            component=component,
            recommendation=recommendation,
            metadata=metadata or {}
        )

    def to_dict(self) -> Dict:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "type": self.error_type.value,
            "severity": self.severity.value,
            "message": self.message,
            "file": self.file_path,
            "line": self.line_number,
            "component": self.component,
            "recommendation": self.recommendation,
        }

        if self.metadata:
            result.update(self.metadata)

        return result


@dataclass
class CheckResults:
    """Results of a member ordering check run."""
    errors: List[LintError] = field(default_factory=list)
    warnings: List[LintError] = field(default_factory=list)
    execution_time: float = 0.0
    target_path: str = "src"
    files_checked: int = 0
    components_checked: int = 0

    def add_error(self, error: LintError) -> None:
        """Add an error to the appropriate list based on severity."""
        if error.severity == Severity.ERROR:
            self.errors.append(error)
        else:
            self.warnings.append(error)

    def get_all_issues(self) -> List[LintError]:
        """Get all issues (errors + warnings)."""
        return self.errors + self.warnings

    def get_summary_by_file(self) -> Dict[str, int]:
        """Get count of issues by file."""
        summary = {}
        for issue in self.get_all_issues():
            if issue.file_path:
                summary[issue.file_path] = summary.get(issue.file_path, 0) + 1
        return summary

    def get_summary_by_component(self) -> Dict[str, int]:
        """Get count of issues by component, keyed as ``file:Component``."""
        summary = {}
        for issue in self.get_all_issues():
            if issue.component:
                key = f"{issue.file_path}:{issue.component}" if issue.file_path else issue.component
                summary[key] = summary.get(key, 0) + 1
        return summary

    def has_errors(self) -> bool:
        """Check if there are any errors (not warnings)."""
        return len(self.errors) > 0

    def to_dict(self) -> Dict:
        """Convert results to dictionary for JSON serialization."""
        all_issues = self.get_all_issues()
        return {
            "timestamp": None,  # Will be set by reporter
            "target_path": self.target_path,
            "execution_time": self.execution_time,
            "summary": {
                "total_errors": len(self.errors),
                "total_warnings": len(self.warnings),
                "files_checked": self.files_checked,
                "components_checked": self.components_checked,
                "by_file": self.get_summary_by_file(),
                "by_component": self.get_summary_by_component(),
            },
            "errors": [issue.to_dict() for issue in all_issues]
        }
