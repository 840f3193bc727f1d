from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping, Optional, Tuple

from timetable_browser.config.model import GlobalConfig, SheetConfig
from timetable_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load UI settings from <root>/global.json. A missing file means defaults.
    """
    global_path = Path(root) / "global.json"
    if not global_path.is_file():
        logger.info("No global.json found, using defaults", extra={"config_root": str(root)})
        return GlobalConfig()

    logger.info("Loading global config", extra={"path": str(global_path)})
    try:
        with global_path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    defaults = GlobalConfig()
    return GlobalConfig(
        ui_title=str(raw.get("ui_title", defaults.ui_title)),
        subtitle=str(raw.get("subtitle", defaults.subtitle)),
    )


def load_settings(
    root: Path,
    environ: Optional[Mapping[str, str]] = None,
) -> Tuple[GlobalConfig, SheetConfig]:
    global_config = load_global_config(root)
    sheet_config = SheetConfig.from_env(environ)

    if not sheet_config.is_complete:
        # Not fatal: the page still renders, just with an empty timetable
        logger.warning(
            "Sheet configuration incomplete",
            extra={"missing": sheet_config.missing_fields()},
        )

    return global_config, sheet_config
