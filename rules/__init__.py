"""Member ordering rules."""

from .groups import Builtin, Regex, PrimitiveMatcher, matches, candidate_ranks
from .resolver import ConfigurationError, DEFAULT_ORDER, OrderResolver, ResolvedOrder, resolve
from .validator import validate
from .sort_comp_rules import SortCompRuleChecker

__all__ = [
    "Builtin",
    "Regex",
    "PrimitiveMatcher",
    "matches",
    "candidate_ranks",
    "ConfigurationError",
    "DEFAULT_ORDER",
    "OrderResolver",
    "ResolvedOrder",
    "resolve",
    "validate",
    "SortCompRuleChecker",
]
