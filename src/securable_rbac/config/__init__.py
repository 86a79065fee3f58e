"""Configuration module for securable-rbac."""

from __future__ import annotations

from securable_rbac.config._config import RbacConfig, configure, get_global_config

__all__ = ["RbacConfig", "configure", "get_global_config"]
