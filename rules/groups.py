#!/usr/bin/env python3
"""
Member group matching.

Decides whether a component member belongs to a group of a resolved order.
Groups are either built-in (fixed React member names and categories) or
regular expressions tested against the member name.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Union

from ..models import MemberDescriptor, MemberKind


# Built-in categories
LIFECYCLE = "lifecycle"
RENDER = "render"
CONSTRUCTOR = "constructor"
STATIC_METHODS = "static-methods"
TYPE_ANNOTATIONS = "type-annotations"
EVERYTHING_ELSE = "everything-else"

CATEGORY_GROUPS = frozenset({
    LIFECYCLE, RENDER, CONSTRUCTOR, STATIC_METHODS, TYPE_ANNOTATIONS, EVERYTHING_ELSE,
})

LIFECYCLE_NAMES = frozenset({
    'displayName', 'propTypes', 'contextType', 'contextTypes', 'childContextTypes',
    'mixins', 'statics', 'defaultProps', 'constructor',
    'getDefaultProps', 'getInitialState', 'getChildContext',
    'getDerivedStateFromProps',
    'componentWillMount', 'UNSAFE_componentWillMount', 'componentDidMount',
    'componentWillReceiveProps', 'UNSAFE_componentWillReceiveProps',
    'shouldComponentUpdate', 'componentWillUpdate', 'UNSAFE_componentWillUpdate',
    'getSnapshotBeforeUpdate', 'componentDidUpdate', 'componentDidCatch',
    'componentWillUnmount',
})

# Names usable on their own as exact-match groups
FIXED_NAMES = LIFECYCLE_NAMES | {'state'}


@dataclass(frozen=True)
class Builtin:
    """A built-in group: a category or an exact member name."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Regex:
    """A pattern group, compiled once when the order is resolved."""
    source: str
    pattern: "re.Pattern"

    def __str__(self) -> str:
        return self.source


PrimitiveMatcher = Union[Builtin, Regex]


def is_builtin_name(name: str) -> bool:
    """Check if a bare token names a built-in group."""
    return name in CATEGORY_GROUPS or name in FIXED_NAMES


def matches(member: MemberDescriptor, matcher: PrimitiveMatcher,
            order: Optional[Iterable[PrimitiveMatcher]] = None) -> bool:
    """
    Check whether a member belongs to the group described by ``matcher``.

    ``order`` is the full resolved order; it is only consulted for
    ``everything-else``, which claims members no other group in that order
    matches. Without an order, ``everything-else`` matches every member.
    """
    if isinstance(matcher, Regex):
        return member.has_known_name and matcher.pattern.fullmatch(member.name) is not None

    name = matcher.name
    if name == EVERYTHING_ELSE:
        others = [m for m in (order or ()) if not _is_everything_else(m)]
        return not any(matches(member, other) for other in others)
    if name == STATIC_METHODS:
        return member.is_static and member.kind == MemberKind.METHOD
    if name == TYPE_ANNOTATIONS:
        return member.kind == MemberKind.TYPE_ANNOTATION_PROPERTY
    if not member.has_known_name:
        return False
    if name == LIFECYCLE:
        return member.name in LIFECYCLE_NAMES
    # render, constructor and fixed names are exact name matches
    return member.name == name


def candidate_ranks(member: MemberDescriptor, order) -> FrozenSet[int]:
    """Get the ranks of every matcher in ``order`` that the member belongs to."""
    matchers = tuple(order)
    claimed = frozenset(
        rank for rank, matcher in enumerate(matchers)
        if not _is_everything_else(matcher) and matches(member, matcher)
    )
    if claimed:
        return claimed
    # Nothing else claimed the member, so every everything-else slot does
    return frozenset(
        rank for rank, matcher in enumerate(matchers) if _is_everything_else(matcher)
    )


def _is_everything_else(matcher: PrimitiveMatcher) -> bool:
    return isinstance(matcher, Builtin) and matcher.name == EVERYTHING_ELSE
