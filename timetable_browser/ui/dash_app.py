from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from timetable_browser.config.loader import load_settings
from timetable_browser.core.view_registry import ViewRegistry
from timetable_browser.ui.layout.build_layout import build_layout
from timetable_browser.ui.callbacks.callbacks_load import register_load_callbacks
from timetable_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from timetable_browser.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    from timetable_browser.views import (
        FacultyView,
        VenueView,
        DefaultView,
    )

    registry = ViewRegistry()
    registry.register(FacultyView)
    registry.register(VenueView)
    registry.register(DefaultView)
    return registry


def create_dash_app(
    config_root: Path | str = Path("config"),
    environ: Optional[Mapping[str, str]] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config, sheet_config = load_settings(config_root, environ)

    # 2) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        sheet_config=sheet_config,
        registry=build_view_registry(),
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_load_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "sheet_configured": sheet_config.is_complete},
    )
    return app
