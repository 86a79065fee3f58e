"""Entry strategies — unconditional grant, unconditional deny, or a predicate."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union

from securable_rbac.exceptions import InvalidPolicyError

__all__ = [
    "DENY",
    "GRANT",
    "Deny",
    "Grant",
    "Predicate",
    "Strategy",
    "StrategyContext",
    "as_strategy",
    "predicate",
]


@dataclass(frozen=True, slots=True)
class StrategyContext:
    """What a predicate strategy gets to look at.

    Attributes:
        role: The single role being interrogated.  Role lists are split
            before any strategy runs.
        securable: The securable description, exactly as the caller gave it.
        data: Opaque contextual payload, passed through untouched.
    """

    role: str
    securable: Any
    data: Any = None


@dataclass(frozen=True, slots=True)
class Grant:
    """Unconditionally grant access."""

    def __repr__(self) -> str:
        return "GRANT"


@dataclass(frozen=True, slots=True)
class Deny:
    """Unconditionally and explicitly deny access."""

    def __repr__(self) -> str:
        return "DENY"


class Predicate:
    """A strategy that decides per request.

    Wraps a callable that takes a :class:`StrategyContext` and returns a
    truthy or falsy value.  Supports ``&`` (AND), ``|`` (OR), and ``~``
    (NOT) composition.

    Example::

        is_manager = Predicate(lambda ctx: ctx.role == "Manager")
        low_value = Predicate(lambda ctx: ctx.data["balance"] < 10_000)

        may_close = is_manager | low_value
        may_close(StrategyContext("Teller", securable, {"balance": 5}))  # True
    """

    __slots__ = ("_fn", "_name")

    def __init__(self, fn: Callable[[StrategyContext], Any], *, name: str = "") -> None:
        self._fn = fn
        self._name = name or getattr(fn, "__name__", "<anonymous>")

    def __call__(self, context: StrategyContext) -> bool:
        return bool(self._fn(context))

    def __and__(self, other: Predicate) -> Predicate:
        def _and(context: StrategyContext) -> bool:
            return self(context) and other(context)

        return Predicate(_and, name=f"({self._name} & {other._name})")

    def __or__(self, other: Predicate) -> Predicate:
        def _or(context: StrategyContext) -> bool:
            return self(context) or other(context)

        return Predicate(_or, name=f"({self._name} | {other._name})")

    def __invert__(self) -> Predicate:
        def _not(context: StrategyContext) -> bool:
            return not self(context)

        return Predicate(_not, name=f"~{self._name}")

    @property
    def name(self) -> str:
        """The human-readable name of this predicate."""
        return self._name

    def __repr__(self) -> str:
        return f"Predicate({self._name!r})"


Strategy = Union[Grant, Deny, Predicate]

GRANT: Grant = Grant()
DENY: Deny = Deny()


def predicate(fn: Callable[[StrategyContext], Any]) -> Predicate:
    """Decorator/factory that creates a Predicate from a callable.

    Example::

        @predicate
        def even_days_only(ctx: StrategyContext) -> bool:
            return ctx.data["day_of_month"] % 2 == 0

        # Or as a factory:
        managers = predicate(lambda ctx: ctx.role == "Manager")
    """
    return Predicate(fn, name=getattr(fn, "__name__", "<lambda>"))


def as_strategy(value: object) -> Strategy:
    """Resolve an authored strategy value into one of the three variants.

    ``True`` grants, ``None`` and ``False`` deny, and any other callable
    becomes a :class:`Predicate`.  Strategies are resolved once, when the
    policy is normalized.

    Raises:
        InvalidPolicyError: If *value* is none of the above.
    """
    if isinstance(value, (Grant, Deny, Predicate)):
        return value
    if value is None or value is False:
        return DENY
    if value is True:
        return GRANT
    if callable(value):
        return predicate(value)
    raise InvalidPolicyError(
        f"strategy must be True, False, None or a callable, got {type(value).__name__}"
    )
