"""Layered configuration for securable-rbac."""

from __future__ import annotations

import re
from dataclasses import dataclass

from securable_rbac._types import MATCH_ANY_ROLE

__all__ = [
    "RbacConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]


@dataclass(frozen=True, slots=True)
class RbacConfig:
    """Layered configuration with merge semantics (global -> engine).

    An engine captures its config when it is constructed; later calls to
    :func:`configure` do not affect engines that already exist.

    Attributes:
        log_decisions: Log every single-role interrogation through the
            ``securable_rbac`` logger.
        default_role_pattern: Regular expression given to policy entries
            that do not declare ``roles``.  Defaults to any non-empty role.

    Example::

        config = RbacConfig(log_decisions=True)
        merged = config.merge(default_role_pattern=r"^(?!Guest$).+$")
    """

    log_decisions: bool = False
    default_role_pattern: str = MATCH_ANY_ROLE

    def __post_init__(self) -> None:
        if not isinstance(self.default_role_pattern, str):
            raise ValueError(
                f"default_role_pattern must be a string, got {self.default_role_pattern!r}"
            )
        try:
            re.compile(self.default_role_pattern)
        except re.error as exc:
            raise ValueError(
                f"default_role_pattern is not a valid regular expression: "
                f"{self.default_role_pattern!r} ({exc})"
            ) from exc

    def merge(
        self,
        *,
        log_decisions: bool | None = None,
        default_role_pattern: str | None = None,
    ) -> RbacConfig:
        """Return a new config with non-None overrides applied.

        Args:
            log_decisions: Override for log_decisions (ignored if None).
            default_role_pattern: Override for default_role_pattern (ignored if None).

        Returns:
            A new ``RbacConfig`` with overrides merged.

        Example::

            base = RbacConfig()
            engine_cfg = base.merge(log_decisions=True)
        """
        return RbacConfig(
            log_decisions=(log_decisions if log_decisions is not None else self.log_decisions),
            default_role_pattern=(
                default_role_pattern
                if default_role_pattern is not None
                else self.default_role_pattern
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = RbacConfig()


def get_global_config() -> RbacConfig:
    """Return the current global configuration.

    Example::

        config = get_global_config()
        print(config.log_decisions)  # False
    """
    return _global_config


def configure(
    *,
    log_decisions: bool | None = None,
    default_role_pattern: str | None = None,
) -> RbacConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Args:
        log_decisions: Enable/disable decision logging.
        default_role_pattern: Role pattern for entries that omit ``roles``.

    Returns:
        The updated global ``RbacConfig``.

    Example::

        configure(log_decisions=True)
        rbac = MethodAccessControl(policy)  # logs its decisions
    """
    global _global_config
    _global_config = _global_config.merge(
        log_decisions=log_decisions,
        default_role_pattern=default_role_pattern,
    )
    return _global_config


def _set_global_config(cfg: RbacConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = RbacConfig()
