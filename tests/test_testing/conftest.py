"""Import fixtures from securable_rbac.testing for test discovery."""

from securable_rbac.testing._fixtures import isolated_rbac_state, method_rbac, rbac_config

__all__ = ["isolated_rbac_state", "method_rbac", "rbac_config"]
