"""Bundled securable matchers."""

from securable_rbac.matchers._method import (
    DEFAULT_METHOD_POLICY,
    MethodAccessControl,
    MethodMatcher,
    MethodSecurable,
)

__all__ = [
    "DEFAULT_METHOD_POLICY",
    "MethodAccessControl",
    "MethodMatcher",
    "MethodSecurable",
]
