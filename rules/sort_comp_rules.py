#!/usr/bin/env python3
"""
Component member ordering rule.

Turns ordering violations in component definitions into reportable errors.
"""

from typing import List

from ..models import ComponentInfo, ErrorType, LintError, Violation, UNKNOWN_NAME_DISPLAY
from ..shared.member_extractor import members_for_validation
from .resolver import ResolvedOrder
from .validator import validate


class SortCompRuleChecker:
    """Checks member order of component definitions against a resolved order."""

    def __init__(self, order: ResolvedOrder):
        self.order = order

    def check_component(self, component: ComponentInfo, relative_path: str) -> List[LintError]:
        """Check a single component definition."""
        members = members_for_validation(component.node)
        violations = validate(members, self.order)
        errors = [self._to_error(violation, component, relative_path) for violation in violations]

        for line_number in component.skipped_lines:
            errors.append(LintError.create_warning(
                message="Member could not be parsed and was not checked",
                error_type=ErrorType.UNPARSED_MEMBER,
                file_path=relative_path,
                line_number=line_number,
                component=component.name,
                recommendation="Check the member for a syntax error",
            ))
        return errors

    def check_components(self, components: List[ComponentInfo], relative_path: str) -> List[LintError]:
        """Check every component of one file; each is validated independently."""
        errors: List[LintError] = []
        for component in components:
            errors.extend(self.check_component(component, relative_path))
        return errors

    def _to_error(self, violation: Violation, component: ComponentInfo, relative_path: str) -> LintError:
        earlier = violation.earlier_name if violation.earlier_name is not None else UNKNOWN_NAME_DISPLAY
        later = violation.later_name if violation.later_name is not None else UNKNOWN_NAME_DISPLAY
        return LintError.create_error(
            message=violation.message,
            error_type=ErrorType.MEMBER_ORDER,
            file_path=relative_path,
            line_number=violation.earlier_line or component.line_number,
            component=component.name,
            recommendation=f"Move '{earlier}' below '{later}'",
            metadata={
                "earlier": {"name": violation.earlier_name, "position": violation.earlier_position},
                "later": {"name": violation.later_name, "position": violation.later_position},
            },
        )
