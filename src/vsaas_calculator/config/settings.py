"""
Centralized settings and path configuration for the cost calculator.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

PRICE_TABLE_ENV = "VSAAS_PRICE_TABLE"


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def get_package_data_dir() -> Path:
    return Path(__file__).resolve().parent.parent / 'data'


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path

    # Price table file; None means the built-in prices
    price_table: Optional[Path] = None

    # kbps; must be one of the selectable bitrate tiers
    default_bitrate: int = 2048
    app_title: str = "Matrix VSaaS Licensing Cost Calculator"
    currency_symbol: str = "$"

    def __post_init__(self):
        # Deferred: engine modules import settings
        from ..engine.models import Bitrate
        self.default_bitrate = Bitrate.parse(self.default_bitrate)

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure and environment."""
        root = project_root or get_project_root()

        override = os.environ.get(PRICE_TABLE_ENV)
        if override:
            price_table = Path(override).expanduser()
        else:
            bundled = get_package_data_dir() / 'price_table.csv'
            price_table = bundled if bundled.exists() else None

        return cls(
            project_root=root,
            price_table=price_table,
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
