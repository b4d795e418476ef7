#!/usr/bin/env python3
"""
Member order validation.

Walks a component's members in declaration order and reports every member
that appears after a member it should precede.
"""

from typing import Iterable, List, Optional

from ..models import MemberDescriptor, MemberKind, Violation
from .resolver import ResolvedOrder


def validate(members: Iterable[MemberDescriptor], order: ResolvedOrder) -> List[Violation]:
    """
    Validate member order in a single left-to-right pass.

    Each member takes the smallest of its candidate ranks that is not below
    the high-water mark, and the mark moves to that member. A member whose
    candidate ranks are all below the mark is reported against the member
    that set the mark, which stays in place, so one misplaced member is
    reported once for every later member it blocks. Members matching no
    group are skipped.
    """
    violations: List[Violation] = []
    high_water_rank = -1
    high_water_member: Optional[MemberDescriptor] = None

    for member in members:
        if member.kind == MemberKind.SPREAD:
            continue

        candidates = order.candidate_ranks(member)
        if not candidates:
            continue

        sufficient = [rank for rank in candidates if rank >= high_water_rank]
        if sufficient:
            high_water_rank = min(sufficient)
            high_water_member = member
        else:
            violations.append(Violation.between(high_water_member, member))

    return violations
