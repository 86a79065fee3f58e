"""Exception hierarchy for securable-rbac."""

from __future__ import annotations

from typing import Any

__all__ = [
    "AuthorizationDenied",
    "InvalidPolicyError",
    "MatcherNotImplementedError",
    "MissingPolicyError",
    "RbacError",
]


class RbacError(Exception):
    """Base exception for all securable-rbac errors."""


class InvalidPolicyError(RbacError, ValueError):
    """The supplied policy is present but malformed.

    Raised synchronously while an engine is being constructed; an engine
    is never built from a policy that fails normalization.

    Attributes:
        index: Position of the offending entry in the policy, or ``None``
            when the policy as a whole is at fault.

    Example::

        try:
            MethodAccessControl({"roles": "^Admin$"})
        except InvalidPolicyError as exc:
            print(exc)  # policy must be a list of entries, got dict
    """

    def __init__(self, message: str, *, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"policy entry {index}: {message}"
        super().__init__(message)


class MissingPolicyError(InvalidPolicyError):
    """A policy is required but none was supplied."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "a policy is required")


class MatcherNotImplementedError(RbacError, NotImplementedError):
    """The engine has no securable matcher.

    The base :class:`~securable_rbac.AccessControl` cannot tell whether a
    policy entry pertains to a securable. Either pass ``matcher=`` or use a
    subclass that overrides ``matches``.

    Attributes:
        engine: Name of the engine class that was interrogated.
    """

    def __init__(self, *, engine: str) -> None:
        self.engine = engine
        super().__init__(
            f"{engine} has no securable matcher; pass matcher= or override matches()"
        )


class AuthorizationDenied(RbacError):  # noqa: N818
    """None of the given roles is permitted to access the securable.

    Attributes:
        roles: The role or roles that were interrogated.
        securable: The securable that was guarded.

    Example::

        try:
            rbac.authorize(["Teller"], MethodSecurable("Account", "close"))
        except AuthorizationDenied as exc:
            print(f"{exc.roles} may not access {exc.securable}")
    """

    def __init__(
        self,
        *,
        roles: Any,
        securable: Any,
        message: str | None = None,
    ) -> None:
        self.roles = roles
        self.securable = securable
        if message is None:
            message = f"No role among {roles!r} is permitted to access {securable!r}"
        super().__init__(message)
