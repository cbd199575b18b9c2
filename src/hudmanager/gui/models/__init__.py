from .hud_list_model import HudListModel
from .roles import HudRoles, role_names

__all__ = ["HudListModel", "HudRoles", "role_names"]
