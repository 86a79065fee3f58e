"""Shared protocols and type aliases for securable-rbac."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Literal, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from securable_rbac.policy._base import PolicyEntry

__all__ = [
    "MATCH_ANY_ROLE",
    "Polarity",
    "RoleSpec",
    "SecurableMatcher",
]

# Role pattern given to entries authored without one.
MATCH_ANY_ROLE = r"^.+$"

# A single role name, or an ordered list of them.
RoleSpec = Union[str, Sequence[str]]

# The outcome a strategy scan is looking for.
Polarity = Literal["grant", "deny"]


@runtime_checkable
class SecurableMatcher(Protocol):
    """Decides whether a policy entry pertains to a securable.

    Implementations must be pure and total: they never mutate their
    arguments and answer ``False`` rather than raising for securables of an
    unexpected shape. Any object with a ``matches`` method satisfies the
    protocol; no inheritance required.

    Example::

        class PathMatcher:
            def matches(self, entry: PolicyEntry, securable: Any) -> bool:
                return fnmatch(securable, entry.fields["paths"])

        rbac = AccessControl(policy, matcher=PathMatcher())
    """

    def matches(self, entry: PolicyEntry, securable: Any) -> bool: ...
