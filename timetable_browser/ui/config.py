from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from timetable_browser.config.model import GlobalConfig, SheetConfig
from timetable_browser.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Shared state for the Dash app, passed into layout + callback
    registration functions instead of module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    sheet_config: SheetConfig
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
