from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rc_browser.config.model import GlobalConfig
from rc_browser.core.session import BrowserSession
from rc_browser.services.map_layer import MapLayer


@dataclass
class AppConfig:
    """
    Shared state for the Dash app, passed into layout and callback
    registration instead of module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    session: Optional[BrowserSession] = None
    map_layer: Optional[MapLayer] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.session is None:
            raise RuntimeError("AppConfig.session must be initialized.")
        if self.map_layer is None:
            raise RuntimeError("AppConfig.map_layer must be initialized.")
