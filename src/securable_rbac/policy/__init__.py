"""Policy store — entries, strategies, and normalization."""

from securable_rbac.policy._base import PolicyEntry
from securable_rbac.policy._store import Policy, normalize_entry, normalize_policy
from securable_rbac.policy._strategy import (
    DENY,
    GRANT,
    Deny,
    Grant,
    Predicate,
    Strategy,
    StrategyContext,
    as_strategy,
    predicate,
)

__all__ = [
    "DENY",
    "GRANT",
    "Deny",
    "Grant",
    "Policy",
    "PolicyEntry",
    "Predicate",
    "Strategy",
    "StrategyContext",
    "as_strategy",
    "normalize_entry",
    "normalize_policy",
    "predicate",
]
