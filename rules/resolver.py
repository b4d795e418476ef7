#!/usr/bin/env python3
"""
Order configuration resolution.

Expands a configured member order (built-in group names, ``/regex/``
literals and custom group names) into a flat, ranked tuple of matchers.
"""

import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..models import MemberDescriptor
from .groups import (
    EVERYTHING_ELSE, Builtin, PrimitiveMatcher, Regex, candidate_ranks, is_builtin_name,
)


DEFAULT_ORDER: Tuple[str, ...] = (
    'displayName',
    'propTypes',
    'contextTypes',
    'childContextTypes',
    'mixins',
    'statics',
    'getDefaultProps',
    'getInitialState',
    'getChildContext',
    'lifecycle',
    'everything-else',
    'render',
)

REGEX_LITERAL = re.compile(r'^/(.*)/([a-z]*)$', re.DOTALL)

# JavaScript regex flags; g and y only affect stateful matching, u is implied
_REGEX_FLAGS = {
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'u': 0,
    'g': 0,
    'y': 0,
}


class ConfigurationError(ValueError):
    """Raised when an order configuration cannot be resolved."""


@dataclass(frozen=True)
class ResolvedOrder:
    """Flat tuple of matchers; a matcher's rank is its index."""
    matchers: Tuple[PrimitiveMatcher, ...]

    def __len__(self) -> int:
        return len(self.matchers)

    def __iter__(self) -> Iterator[PrimitiveMatcher]:
        return iter(self.matchers)

    def __getitem__(self, rank: int) -> PrimitiveMatcher:
        return self.matchers[rank]

    def candidate_ranks(self, member: MemberDescriptor) -> FrozenSet[int]:
        return candidate_ranks(member, self.matchers)

    def describe(self) -> List[str]:
        return [str(matcher) for matcher in self.matchers]


def is_regex_literal(token: str) -> bool:
    return bool(REGEX_LITERAL.match(token))


def compile_regex_literal(token: str) -> Regex:
    """Compile a ``/pattern/flags`` literal into a Regex matcher."""
    match = REGEX_LITERAL.match(token)
    if not match:
        raise ConfigurationError(f"Not a regular expression literal: {token!r}")

    source, flag_chars = match.group(1), match.group(2)
    flags = 0
    for flag in flag_chars:
        if flag not in _REGEX_FLAGS:
            raise ConfigurationError(f"Unsupported regular expression flag {flag!r} in {token!r}")
        flags |= _REGEX_FLAGS[flag]

    try:
        pattern = re.compile(source, flags)
    except re.error as e:
        raise ConfigurationError(f"Invalid regular expression {token!r}: {e}") from e

    return Regex(source=token, pattern=pattern)


def resolve(order_tokens: Optional[Sequence[str]] = None,
            custom_groups: Optional[Mapping[str, Sequence[str]]] = None,
            default_order: Sequence[str] = DEFAULT_ORDER) -> ResolvedOrder:
    """
    Resolve an order configuration into ranked matchers.

    An empty or missing ``order_tokens`` falls back to ``default_order``.
    Custom groups are expanded in place. If the result has no
    ``everything-else`` group, one is appended so that unmatched members rank
    after every configured group.
    """
    custom_groups = custom_groups or {}
    expanded_groups = _expand_custom_groups(custom_groups)
    tokens = list(order_tokens) if order_tokens else list(default_order)

    matchers: List[PrimitiveMatcher] = []
    for token in tokens:
        if not isinstance(token, str):
            raise ConfigurationError(f"Order entries must be strings, got {token!r}")
        if is_regex_literal(token):
            matchers.append(compile_regex_literal(token))
        elif token in expanded_groups:
            matchers.extend(expanded_groups[token])
        elif is_builtin_name(token):
            matchers.append(Builtin(token))
        else:
            raise ConfigurationError(
                f"Unknown group {token!r}: not a built-in group, a /regex/ literal, "
                f"or a group declared in 'groups'"
            )

    if Builtin(EVERYTHING_ELSE) not in matchers:
        matchers.append(Builtin(EVERYTHING_ELSE))

    return ResolvedOrder(tuple(matchers))


def _expand_custom_groups(custom_groups: Mapping[str, Sequence[str]]) -> Dict[str, List[Regex]]:
    """Compile every custom group's regex list, rejecting nested group references."""
    expanded = {}
    for group_name, entries in custom_groups.items():
        if is_builtin_name(group_name):
            raise ConfigurationError(f"Custom group {group_name!r} shadows a built-in group")
        if isinstance(entries, str) or not isinstance(entries, Sequence):
            raise ConfigurationError(f"Custom group {group_name!r} must be a list of /regex/ literals")

        compiled = []
        for entry in entries:
            if not isinstance(entry, str) or not is_regex_literal(entry):
                if isinstance(entry, str) and entry in custom_groups:
                    raise ConfigurationError(
                        f"Custom group {group_name!r} references group {entry!r}; "
                        f"groups cannot be nested"
                    )
                raise ConfigurationError(
                    f"Custom group {group_name!r} entry {entry!r} is not a /regex/ literal"
                )
            compiled.append(compile_regex_literal(entry))
        expanded[group_name] = compiled
    return expanded


class OrderResolver:
    """Resolves order configurations, caching each distinct configuration."""

    def __init__(self, default_order: Sequence[str] = DEFAULT_ORDER):
        self.default_order = tuple(default_order)
        self._cache: Dict[Tuple, ResolvedOrder] = {}

    def resolve(self, order_tokens: Optional[Sequence[str]] = None,
                custom_groups: Optional[Mapping[str, Sequence[str]]] = None) -> ResolvedOrder:
        try:
            key = self._cache_key(order_tokens, custom_groups)
            hash(key)
        except TypeError:
            # Malformed entries; resolve() reports them
            return resolve(order_tokens, custom_groups, self.default_order)

        if key in self._cache:
            return self._cache[key]

        resolved = resolve(order_tokens, custom_groups, self.default_order)
        self._cache[key] = resolved
        return resolved

    @staticmethod
    def _cache_key(order_tokens, custom_groups) -> Tuple:
        order_key = tuple(order_tokens or ())
        groups_key = tuple(
            (name, tuple(entries) if not isinstance(entries, str) else entries)
            for name, entries in sorted((custom_groups or {}).items())
        )
        return order_key, groups_key
