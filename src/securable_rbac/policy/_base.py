"""PolicyEntry dataclass — one normalized rule of a policy."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from securable_rbac._types import MATCH_ANY_ROLE
from securable_rbac.exceptions import InvalidPolicyError
from securable_rbac.policy._strategy import DENY, Strategy, as_strategy

__all__ = ["PolicyEntry", "compile_roles"]


def compile_roles(roles: object, default_role_pattern: str = MATCH_ANY_ROLE) -> re.Pattern[str]:
    """Resolve an authored ``roles`` value into a compiled ``str`` pattern.

    Raises:
        InvalidPolicyError: If *roles* is not a string or ``str`` pattern,
            or does not compile.
    """
    if roles is None:
        return re.compile(default_role_pattern)
    if isinstance(roles, re.Pattern):
        if not isinstance(roles.pattern, str):
            raise InvalidPolicyError("roles pattern must match str, not bytes")
        return roles
    if isinstance(roles, str):
        try:
            return re.compile(roles)
        except re.error as exc:
            raise InvalidPolicyError(f"invalid roles pattern {roles!r} ({exc})") from exc
    raise InvalidPolicyError(f"roles must be a pattern or string, got {type(roles).__name__}")


@dataclass(frozen=True, slots=True)
class PolicyEntry:
    """A single normalized policy rule.

    Built directly, an entry resolves its own ``roles`` and ``strategy``
    the same way authored mappings are normalized: a string is compiled,
    ``True`` grants, ``None``/``False`` deny, a callable becomes a
    ``Predicate``.

    Attributes:
        roles: Compiled pattern searched against a role name.
        strategy: ``GRANT``, ``DENY`` or a ``Predicate``.
        fields: Every other authored key.  These identify the securables
            the entry pertains to and are only read by the securable
            matcher, never by the engine itself.
        name: Optional label used in log output.

    Raises:
        InvalidPolicyError: If ``roles`` or ``strategy`` cannot be resolved.
    """

    roles: re.Pattern[str]
    strategy: Strategy = DENY
    fields: Mapping[str, Any] = field(default_factory=dict)
    name: str = ""

    def __post_init__(self) -> None:
        # Use object.__setattr__ because the dataclass is frozen
        object.__setattr__(self, "roles", compile_roles(self.roles))
        object.__setattr__(self, "strategy", as_strategy(self.strategy))
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def role_matches(self, role: object) -> bool:
        """Whether *role* satisfies this entry's role pattern."""
        return isinstance(role, str) and self.roles.search(role) is not None

    def label(self) -> str:
        """The entry name, or its role pattern when unnamed."""
        return self.name or f"roles={self.roles.pattern!r}"
