"""Pytest fixtures for testing securable-rbac policies."""

from __future__ import annotations

from collections.abc import Callable, Generator, Mapping, Sequence
from typing import Any

import pytest

from securable_rbac.config._config import RbacConfig
from securable_rbac.matchers._method import MethodAccessControl

__all__ = ["isolated_rbac_state", "method_rbac", "rbac_config"]


@pytest.fixture()
def rbac_config() -> RbacConfig:
    """Provide a default ``RbacConfig`` for testing.

    Example::

        def test_with_config(rbac_config):
            assert rbac_config.log_decisions is False
    """
    return RbacConfig()


@pytest.fixture()
def isolated_rbac_state() -> Generator[RbacConfig, None, None]:
    """Pytest fixture that isolates the global config for each test.

    Resets the global config before the test and restores the original
    afterwards.

    Example::

        def test_something(isolated_rbac_state):
            configure(log_decisions=True)  # undone after the test
    """
    from securable_rbac.testing._isolation import isolated_rbac

    with isolated_rbac() as config:
        yield config


@pytest.fixture()
def method_rbac(
    rbac_config: RbacConfig,
) -> Callable[..., MethodAccessControl]:
    """Provide a factory building ``MethodAccessControl`` engines.

    Engines are built with the ``rbac_config`` fixture, so overriding that
    fixture changes every engine a test builds.

    Example::

        def test_managers_close(method_rbac):
            rbac = method_rbac([{"roles": "^Manager$", "classes": "^Account$",
                                 "methods": "^close$", "strategy": True}])
            assert rbac.permits("Manager", MethodSecurable("Account", "close"))
    """

    def factory(
        policy: Sequence[Mapping[str, Any]] | None = None,
    ) -> MethodAccessControl:
        return MethodAccessControl(policy, config=rbac_config)

    return factory
