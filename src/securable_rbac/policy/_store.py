"""Policy store — normalization of authored rules into an immutable sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, overload

from securable_rbac._types import MATCH_ANY_ROLE
from securable_rbac.exceptions import InvalidPolicyError, MissingPolicyError
from securable_rbac.policy._base import PolicyEntry, compile_roles
from securable_rbac.policy._strategy import as_strategy

__all__ = ["Policy", "normalize_entry", "normalize_policy"]

# Keys the engine itself consumes; everything else is a matcher field.
_ENGINE_KEYS = frozenset({"roles", "strategy", "name"})


class Policy(Sequence[PolicyEntry]):
    """Ordered, immutable collection of normalized policy entries.

    Entry order is the authored order and is significant: interrogation
    scans entries first to last.  A ``Policy`` is never modified after it
    is built; a changed policy means a new engine.

    Example::

        policy = normalize_policy([{"classes": "^Foo$", "methods": "^bar$"}])
        assert policy[0].strategy is DENY
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[PolicyEntry] = ()) -> None:
        self._entries: tuple[PolicyEntry, ...] = tuple(entries)

    @overload
    def __getitem__(self, index: int) -> PolicyEntry: ...

    @overload
    def __getitem__(self, index: slice) -> Policy: ...

    def __getitem__(self, index: int | slice) -> PolicyEntry | Policy:
        if isinstance(index, slice):
            return Policy(self._entries[index])
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PolicyEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Policy({len(self._entries)} entries)"


def normalize_entry(
    raw: PolicyEntry | Mapping[str, Any],
    *,
    default_role_pattern: str = MATCH_ANY_ROLE,
) -> PolicyEntry:
    """Normalize one authored rule.

    A missing ``roles`` becomes *default_role_pattern* and a missing
    ``strategy`` becomes ``DENY``.  ``PolicyEntry`` instances resolved
    their own fields when built and pass through unchanged.

    Raises:
        InvalidPolicyError: If *raw* is not a mapping, or its roles or
            strategy cannot be resolved.
    """
    if isinstance(raw, PolicyEntry):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidPolicyError(
            f"entry must be a mapping or PolicyEntry, got {type(raw).__name__}"
        )
    return PolicyEntry(
        roles=compile_roles(raw.get("roles"), default_role_pattern),
        strategy=as_strategy(raw.get("strategy")),
        fields={key: value for key, value in raw.items() if key not in _ENGINE_KEYS},
        name=str(raw.get("name") or ""),
    )


def normalize_policy(
    raw: Sequence[PolicyEntry | Mapping[str, Any]] | None,
    *,
    default_role_pattern: str = MATCH_ANY_ROLE,
) -> Policy:
    """Normalize an authored policy into an immutable :class:`Policy`.

    The result has the same length and order as *raw*.  Only the shape
    of the policy and the engine-owned keys of each entry are checked;
    matcher fields are left to the matcher.

    Args:
        raw: A list or tuple of entries.  An existing ``Policy`` is
            returned as is.
        default_role_pattern: Role pattern for entries without ``roles``.

    Returns:
        The normalized ``Policy``.

    Raises:
        MissingPolicyError: If *raw* is ``None``.
        InvalidPolicyError: If *raw* is not list-shaped or an entry is
            malformed.

    Example::

        policy = normalize_policy([
            {"roles": "^Manager$", "classes": ".*", "methods": ".*", "strategy": True},
        ])
    """
    if raw is None:
        raise MissingPolicyError()
    if isinstance(raw, Policy):
        return raw
    if not isinstance(raw, (list, tuple)):
        raise InvalidPolicyError(f"policy must be a list of entries, got {type(raw).__name__}")

    entries: list[PolicyEntry] = []
    for index, item in enumerate(raw):
        try:
            entries.append(normalize_entry(item, default_role_pattern=default_role_pattern))
        except InvalidPolicyError as exc:
            raise InvalidPolicyError(str(exc), index=index) from exc
    return Policy(entries)
