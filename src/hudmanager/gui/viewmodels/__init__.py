from .signal import Signal, ObservableProperty
from .base import BaseViewModel
from .hud_list_viewmodel import HudListViewModel

__all__ = [
    "BaseViewModel",
    "HudListViewModel",
    "ObservableProperty",
    "Signal",
]
