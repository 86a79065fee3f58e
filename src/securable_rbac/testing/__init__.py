"""securable-rbac testing utilities — assertions, isolation, and fixtures.

Provides test helpers for verifying access control policies:

- **Assertion helpers**: ``assert_permits``, ``assert_not_permitted``,
  ``assert_explicitly_denies``, ``assert_not_denied``.
- **Isolation**: ``isolated_rbac`` for the global configuration.
- **Fixtures**: ``rbac_config``, ``isolated_rbac_state``, ``method_rbac``.

Example::

    from securable_rbac import MethodSecurable
    from securable_rbac.testing import assert_permits

    def test_admin_closes_accounts(method_rbac):
        rbac = method_rbac(POLICY)
        assert_permits(rbac, "Administrator", MethodSecurable("Account", "close"))
"""

from securable_rbac.testing._assertions import (
    assert_explicitly_denies,
    assert_not_denied,
    assert_not_permitted,
    assert_permits,
)
from securable_rbac.testing._fixtures import (
    isolated_rbac_state,
    method_rbac,
    rbac_config,
)
from securable_rbac.testing._isolation import isolated_rbac

__all__ = [
    "assert_explicitly_denies",
    "assert_not_denied",
    "assert_not_permitted",
    "assert_permits",
    "isolated_rbac",
    "isolated_rbac_state",
    "method_rbac",
    "rbac_config",
]
