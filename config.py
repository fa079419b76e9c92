"""
Day Grid configuration.

Values come from environment variables with sensible defaults so the app
runs with a plain `streamlit run app.py`.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict


@dataclass(frozen=True)
class WidgetConfig:
    """Geometry of one rendered widget"""
    widget_width: int = 342
    padding: int = 8
    spacing: int = 3
    rows: int = 3
    corner_radius: int = 4
    title_size: int = 16
    subtitle_size: int = 14


COUNTDOWN_WIDGET = WidgetConfig(widget_width=342)
HABIT_WIDGET = WidgetConfig(widget_width=364)


@dataclass
class StorageConfig:
    data_dir: Path
    db_path: Path
    snapshot_dir: Path


@dataclass
class LoggingConfig:
    log_dir: Path
    level: str = "INFO"
    max_bytes: int = 10_000_000
    backup_count: int = 5

    @property
    def log_file(self) -> Path:
        return self.log_dir / "daygrid.log"


class AppConfig:
    """Main configuration object"""

    def __init__(self, env: Dict[str, str] = None):
        self._env = os.environ if env is None else env
        self._load_config()

    def _get(self, key: str, default: str) -> str:
        value = self._env.get(key)
        return value if value else default

    def _load_config(self):
        data_dir = Path(self._get("DAYGRID_DATA_DIR", "data"))
        self.storage = StorageConfig(
            data_dir=data_dir,
            db_path=Path(self._get("DAYGRID_DB_PATH", str(data_dir / "daygrid.db"))),
            snapshot_dir=Path(self._get("DAYGRID_SNAPSHOT_DIR", str(data_dir / "snapshots"))),
        )
        self.logging = LoggingConfig(
            log_dir=Path(self._get("DAYGRID_LOG_DIR", "logs")),
            level=self._get("LOG_LEVEL", "INFO").upper(),
        )

    def ensure_directories(self):
        for d in (self.storage.data_dir, self.storage.db_path.parent,
                  self.storage.snapshot_dir, self.logging.log_dir):
            d.mkdir(parents=True, exist_ok=True)

    def widget_for(self, kind: str) -> WidgetConfig:
        return COUNTDOWN_WIDGET if kind == "countdown" else HABIT_WIDGET


def get_config() -> AppConfig:
    config = AppConfig()
    config.ensure_directories()
    return config
