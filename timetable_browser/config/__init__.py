from .model import GlobalConfig, SheetConfig
from .loader import load_global_config, load_settings

__all__ = [
    "GlobalConfig",
    "SheetConfig",
    "load_global_config",
    "load_settings",
]
