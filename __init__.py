"""Component member ordering checks."""

from .models import (
    CheckResults, ComponentInfo, ErrorType, LintError, MemberDescriptor, MemberKind,
    Severity, Violation,
)
from .rules import ConfigurationError, DEFAULT_ORDER, ResolvedOrder, resolve, validate
from .shared import extract_members, members_for_validation

__all__ = [
    "CheckResults",
    "ComponentInfo",
    "ErrorType",
    "LintError",
    "MemberDescriptor",
    "MemberKind",
    "Severity",
    "Violation",
    "ConfigurationError",
    "DEFAULT_ORDER",
    "ResolvedOrder",
    "resolve",
    "validate",
    "extract_members",
    "members_for_validation",
]
