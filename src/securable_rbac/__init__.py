"""securable-rbac — Role-based access control for arbitrary securables.

Interrogates an ordered policy of rules to decide whether roles may access
a securable.  What a securable is stays pluggable; methods on classes are
supported out of the box.

Example::

    from securable_rbac import MethodAccessControl, MethodSecurable

    rbac = MethodAccessControl([
        {"roles": r"^Manager$", "classes": r"^Account$", "methods": r"^close$",
         "strategy": True},
    ])
    rbac.permits("Manager", MethodSecurable("Account", "close"))  # True
    rbac.permits("Teller", MethodSecurable("Account", "close"))   # False
"""

from importlib.metadata import PackageNotFoundError, version

from securable_rbac._engine import AccessControl
from securable_rbac._types import RoleSpec, SecurableMatcher
from securable_rbac.config._config import RbacConfig, configure
from securable_rbac.exceptions import (
    AuthorizationDenied,
    InvalidPolicyError,
    MatcherNotImplementedError,
    MissingPolicyError,
    RbacError,
)
from securable_rbac.matchers._method import (
    DEFAULT_METHOD_POLICY,
    MethodAccessControl,
    MethodMatcher,
    MethodSecurable,
)
from securable_rbac.policy._base import PolicyEntry
from securable_rbac.policy._store import Policy, normalize_policy
from securable_rbac.policy._strategy import (
    DENY,
    GRANT,
    Predicate,
    StrategyContext,
    predicate,
)

try:
    __version__ = version("securable-rbac")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "AccessControl",
    "AuthorizationDenied",
    "DEFAULT_METHOD_POLICY",
    "DENY",
    "GRANT",
    "InvalidPolicyError",
    "MatcherNotImplementedError",
    "MethodAccessControl",
    "MethodMatcher",
    "MethodSecurable",
    "MissingPolicyError",
    "Policy",
    "PolicyEntry",
    "Predicate",
    "RbacConfig",
    "RbacError",
    "RoleSpec",
    "SecurableMatcher",
    "StrategyContext",
    "configure",
    "normalize_policy",
    "predicate",
]
