"""AccessControl — role-based interrogation of an ordered policy."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from securable_rbac._types import Polarity, RoleSpec, SecurableMatcher
from securable_rbac.config._config import RbacConfig, get_global_config
from securable_rbac.exceptions import AuthorizationDenied, MatcherNotImplementedError
from securable_rbac.policy._base import PolicyEntry
from securable_rbac.policy._store import Policy, normalize_policy
from securable_rbac.policy._strategy import Deny, Grant, Predicate, StrategyContext

__all__ = ["AccessControl"]


def _is_role_list(role: object) -> bool:
    return isinstance(role, Sequence) and not isinstance(role, (str, bytes))


class AccessControl:
    """Answers whether roles may access a securable under a fixed policy.

    The engine knows nothing about what a securable looks like.  Deciding
    whether an entry pertains to a securable is delegated to a
    :class:`~securable_rbac.SecurableMatcher`, supplied either as
    ``matcher=`` or by a subclass overriding :meth:`matches`.

    Two questions can be asked: :meth:`permits` and
    :meth:`explicitly_denies`.  Both scan the matching entries in policy
    order.  Note that for ``explicitly_denies`` a predicate that answers
    falsy ends the scan with ``False``, so an explicit ``DENY`` entry placed
    after a predicate for the same securable is never reached.  Put
    unconditional denials before predicates when both apply.

    The engine holds no mutable state and may be shared across threads.

    Example::

        rbac = AccessControl(policy, matcher=PathMatcher())
        if not rbac.permits(["Teller", "Auditor"], "/accounts/42", data=request):
            raise PermissionError("no")
    """

    def __init__(
        self,
        policy: Sequence[PolicyEntry | Mapping[str, Any]] | None,
        *,
        matcher: SecurableMatcher | None = None,
        config: RbacConfig | None = None,
    ) -> None:
        self._config = config if config is not None else get_global_config()
        self._matcher = matcher
        self._policy = normalize_policy(
            policy, default_role_pattern=self._config.default_role_pattern
        )

    @property
    def policy(self) -> Policy:
        """The normalized, immutable policy."""
        return self._policy

    @property
    def config(self) -> RbacConfig:
        """The configuration captured at construction."""
        return self._config

    def matches(self, entry: PolicyEntry, securable: Any) -> bool:
        """Whether *entry* pertains to *securable*.

        Delegates to the matcher given at construction.  Subclasses built
        for one securable shape override this instead.

        Raises:
            MatcherNotImplementedError: If there is no matcher.
        """
        if self._matcher is None:
            raise MatcherNotImplementedError(engine=type(self).__name__)
        return self._matcher.matches(entry, securable)

    def find_entries(self, role: str, securable: Any) -> list[PolicyEntry]:
        """Return the entries pertaining to *role* and *securable*, in policy order.

        Every entry is tested on its own; nothing is cached between calls.

        Raises:
            MatcherNotImplementedError: If the engine has no matcher.
        """
        self._require_matcher()
        return [
            entry
            for entry in self._policy
            if entry.role_matches(role) and self.matches(entry, securable)
        ]

    def permits(self, role: RoleSpec, securable: Any, data: Any = None) -> bool:
        """Whether *role* is granted access to *securable*.

        With a list of roles, access is permitted when no role is
        explicitly denied and at least one role is permitted.

        Args:
            role: A role name or an ordered list of role names.
            securable: The securable description understood by the matcher.
            data: Opaque contextual data handed to predicate strategies.

        Returns:
            ``True`` if a granting entry was found, ``False`` otherwise.

        Example::

            rbac.permits("Manager", MethodSecurable("Account", "close"))
        """
        self._require_matcher()
        if _is_role_list(role):
            roles = list(role)
            denials = [self.explicitly_denies(it, securable, data) for it in roles]
            if any(denials):
                return False
            return any([self.permits(it, securable, data) for it in roles])

        return self._interrogate(role, securable, data, polarity="grant")  # type: ignore[arg-type]

    def explicitly_denies(self, role: RoleSpec, securable: Any, data: Any = None) -> bool:
        """Whether *role* is explicitly denied access to *securable*.

        With a list of roles, the answer is ``True`` when any role is
        explicitly denied.

        Args:
            role: A role name or an ordered list of role names.
            securable: The securable description understood by the matcher.
            data: Opaque contextual data handed to predicate strategies.

        Returns:
            ``True`` if an explicit denial was found, ``False`` otherwise.
        """
        self._require_matcher()
        if _is_role_list(role):
            return any([self.explicitly_denies(it, securable, data) for it in role])

        return self._interrogate(role, securable, data, polarity="deny")  # type: ignore[arg-type]

    def authorize(
        self,
        role: RoleSpec,
        securable: Any,
        data: Any = None,
        *,
        message: str | None = None,
    ) -> None:
        """Assert that *role* is permitted to access *securable*.

        Raises :class:`~securable_rbac.exceptions.AuthorizationDenied` when
        :meth:`permits` answers ``False``.  Returns ``None`` on success.

        Example::

            rbac.authorize(current_roles(), MethodSecurable("Account", "close"), data=account)
        """
        if not self.permits(role, securable, data):
            raise AuthorizationDenied(roles=role, securable=securable, message=message)

    def _require_matcher(self) -> None:
        # Checked before any role is looked at, so an empty role list still raises.
        if self._matcher is None and type(self).matches is AccessControl.matches:
            raise MatcherNotImplementedError(engine=type(self).__name__)

    def _interrogate(self, role: str, securable: Any, data: Any, *, polarity: Polarity) -> bool:
        entries = self.find_entries(role, securable)
        result = self._scan(entries, StrategyContext(role, securable, data), polarity)

        if self._config.log_decisions:
            from securable_rbac._audit import log_interrogation

            log_interrogation(
                polarity=polarity,
                role=role,
                securable=securable,
                entries=entries,
                result=result,
            )
        return result

    @staticmethod
    def _scan(entries: Sequence[PolicyEntry], context: StrategyContext, polarity: Polarity) -> bool:
        for entry in entries:
            strategy = entry.strategy
            if isinstance(strategy, Predicate):
                granted = strategy(context)
                if polarity == "grant" and granted:
                    return True
                # A falsy predicate settles the deny question for this request.
                if polarity == "deny" and not granted:
                    return False
            elif isinstance(strategy, Grant):
                if polarity == "grant":
                    return True
            elif isinstance(strategy, Deny):
                if polarity == "deny":
                    return True
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._policy!r})"
