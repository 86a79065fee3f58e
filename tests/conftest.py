"""Shared test fixtures for securable-rbac tests."""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass, field
from typing import Any

import pytest

from securable_rbac.config._config import _reset_global_config
from securable_rbac.matchers._method import MethodSecurable
from securable_rbac.policy._base import PolicyEntry

# ---------------------------------------------------------------------------
# Securables
# ---------------------------------------------------------------------------

FOO_BAR = MethodSecurable("Foo", "bar")
ACCOUNT_OPEN = MethodSecurable("Account", "open")
ACCOUNT_CLOSE = MethodSecurable("Account", "close")


def method_entry(
    strategy: Any = None,
    *,
    roles: str | None = None,
    classes: str = r"^Foo$",
    methods: str = r"^bar$",
    **extra: Any,
) -> dict[str, Any]:
    """Build a raw method policy entry, omitting keys left as None."""
    entry: dict[str, Any] = {"classes": classes, "methods": methods, **extra}
    if roles is not None:
        entry["roles"] = roles
    if strategy is not None:
        entry["strategy"] = strategy
    return entry


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------


class NameMatcher:
    """Matches securables that are plain strings against an entry's ``names`` set."""

    def matches(self, entry: PolicyEntry, securable: Any) -> bool:
        return isinstance(securable, str) and securable in entry.fields.get("names", ())


@dataclass
class RecordingPredicate:
    """Callable strategy that records every context it was asked about."""

    answer: bool
    calls: list[Any] = field(default_factory=list)

    def __call__(self, context: Any) -> bool:
        self.calls.append(context)
        return self.answer


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_global_config() -> Generator[None, None, None]:
    _reset_global_config()
    yield
    _reset_global_config()
