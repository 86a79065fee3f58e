"""Method securables — access control over methods of named classes."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from securable_rbac._engine import AccessControl
from securable_rbac.config._config import RbacConfig
from securable_rbac.exceptions import InvalidPolicyError
from securable_rbac.policy._base import PolicyEntry

__all__ = [
    "DEFAULT_METHOD_POLICY",
    "MethodAccessControl",
    "MethodMatcher",
    "MethodSecurable",
]

_MATCH_ANYTHING = r"^.*$"

# Every role may invoke every method of every class.
DEFAULT_METHOD_POLICY: tuple[Mapping[str, Any], ...] = (
    MappingProxyType(
        {
            "roles": _MATCH_ANYTHING,
            "classes": _MATCH_ANYTHING,
            "methods": _MATCH_ANYTHING,
            "strategy": True,
        }
    ),
)


@dataclass(frozen=True, slots=True)
class MethodSecurable:
    """A method on a class, identified by name.

    Example::

        MethodSecurable("Account", "close")
        MethodSecurable.of(Account, "close")  # same thing
    """

    class_name: str
    method_name: str

    @classmethod
    def of(cls, owner: type | str, method_name: str) -> MethodSecurable:
        """Build a securable from a class (or class name) and a method name."""
        class_name = owner if isinstance(owner, str) else owner.__name__
        return cls(class_name, method_name)

    def __str__(self) -> str:
        return f"{self.class_name}.{self.method_name}"


def _names(securable: Any) -> tuple[str | None, str | None]:
    if isinstance(securable, MethodSecurable):
        class_name: object = securable.class_name
        method_name: object = securable.method_name
    elif isinstance(securable, Mapping):
        class_name = securable.get("class")
        method_name = securable.get("method")
    else:
        return None, None
    return (
        class_name if isinstance(class_name, str) else None,
        method_name if isinstance(method_name, str) else None,
    )


def _searchable(pattern: object) -> bool:
    if isinstance(pattern, re.Pattern):
        return isinstance(pattern.pattern, str)
    return isinstance(pattern, str)


class MethodMatcher:
    """Matches entries carrying ``classes`` and ``methods`` patterns.

    An entry pertains to a securable when its ``classes`` pattern is found
    in the class name and its ``methods`` pattern is found in the method
    name.  Securables are :class:`MethodSecurable` values or mappings with
    ``"class"`` and ``"method"`` keys; anything else never matches.
    """

    FIELDS: tuple[str, ...] = ("classes", "methods")

    def validate_entry(self, entry: PolicyEntry, *, index: int | None = None) -> None:
        """Check that *entry* carries usable ``classes`` and ``methods`` patterns.

        Raises:
            InvalidPolicyError: If a field is missing, is not a pattern or
                string, or does not compile.
        """
        for key in self.FIELDS:
            pattern = entry.fields.get(key)
            if pattern is None:
                raise InvalidPolicyError(f"missing {key!r} pattern", index=index)
            if isinstance(pattern, re.Pattern):
                if not isinstance(pattern.pattern, str):
                    raise InvalidPolicyError(
                        f"{key!r} pattern must match str, not bytes", index=index
                    )
                continue
            if not isinstance(pattern, str):
                raise InvalidPolicyError(
                    f"{key!r} must be a pattern or string, got {type(pattern).__name__}",
                    index=index,
                )
            try:
                re.compile(pattern)
            except re.error as exc:
                raise InvalidPolicyError(
                    f"invalid {key!r} pattern {pattern!r} ({exc})", index=index
                ) from exc

    def matches(self, entry: PolicyEntry, securable: Any) -> bool:
        class_name, method_name = _names(securable)
        if class_name is None or method_name is None:
            return False
        classes = entry.fields.get("classes")
        methods = entry.fields.get("methods")
        if not _searchable(classes) or not _searchable(methods):
            return False
        return (
            re.search(classes, class_name) is not None
            and re.search(methods, method_name) is not None
        )


class MethodAccessControl(AccessControl):
    """Role-based access control whose securables are methods on classes.

    The only action is, of course, "invoke".  Policy entries carry the
    standard ``roles`` and ``strategy`` keys plus ``classes`` and
    ``methods``, regular expressions over class names and method names.

    For example, to let ``Administrator`` invoke anything, let ``Teller``
    and ``Manager`` open accounts, and let only ``Manager`` close
    high-value ones::

        policy = [
            {"roles": r"^Administrator$", "classes": r"^.+$", "methods": r"^.+$",
             "strategy": True},
            {"roles": r"^(Teller|Manager)$", "classes": r"^Account$",
             "methods": r"^open$", "strategy": True},
            {"classes": r"^Account$", "methods": r"^close$",
             "strategy": lambda ctx: ctx.role == "Manager"
                 or (ctx.role == "Teller" and ctx.data.balance < 10_000)},
        ]
        rbac = MethodAccessControl(policy)
        rbac.authorize(roles, MethodSecurable("Account", "close"), data=account)

    Without a policy, :data:`DEFAULT_METHOD_POLICY` (allow everything)
    applies.
    """

    def __init__(
        self,
        policy: Sequence[PolicyEntry | Mapping[str, Any]] | None = None,
        *,
        config: RbacConfig | None = None,
    ) -> None:
        matcher = MethodMatcher()
        super().__init__(
            policy if policy is not None else DEFAULT_METHOD_POLICY,
            matcher=matcher,
            config=config,
        )
        for index, entry in enumerate(self.policy):
            matcher.validate_entry(entry, index=index)
