"""Decision logging for policy interrogations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from securable_rbac._types import Polarity
from securable_rbac.policy._base import PolicyEntry

__all__ = ["log_interrogation"]

logger = logging.getLogger("securable_rbac")

_OPERATIONS: dict[str, str] = {"grant": "permits", "deny": "explicitly_denies"}


def log_interrogation(
    *,
    polarity: Polarity,
    role: Any,
    securable: Any,
    entries: Sequence[PolicyEntry],
    result: bool,
) -> None:
    """Log the outcome of one single-role interrogation.

    Logging levels:
    - INFO: Summary (operation, role, securable, entry count, result)
    - DEBUG: Detailed (labels of the entries that were consulted)
    - WARNING: No entry matched (deny-by-default applied)

    Example::

        log_interrogation(
            polarity="grant",
            role="Teller",
            securable=MethodSecurable("Account", "close"),
            entries=matched_entries,
            result=False,
        )
    """
    operation = _OPERATIONS[polarity]

    if not entries:
        logger.warning(
            "%s: no policy entry matches role %r on %r; deny-by-default applied",
            operation,
            role,
            securable,
        )
        return

    logger.info(
        "%s: role %r on %r -> %s (%d matching entr%s)",
        operation,
        role,
        securable,
        result,
        len(entries),
        "y" if len(entries) == 1 else "ies",
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s: entries consulted for role %r on %r: %s",
            operation,
            role,
            securable,
            [f"{entry.label()} -> {entry.strategy!r}" for entry in entries],
        )
