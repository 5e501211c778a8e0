"""
Paging settings management
Loads and validates settings from pagedlist.yml using Pydantic
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger("PagedList.Settings")

DEFAULT_CONFIG_PATH = Path("pagedlist.yml")


class PagingSettings(BaseModel):
    """Pagination-related settings"""
    page_size: int = Field(
        default=20,
        ge=0,
        description="Number of items requested per page"
    )
    offset: int = Field(
        default=0,
        ge=0,
        description="Position of the first item requested"
    )
    load_on_attach: bool = Field(
        default=True,
        description="Load the first page as soon as a view is attached"
    )
    scroll_threshold: int = Field(
        default=50,
        ge=0,
        description="Distance in pixels from the bottom that counts as the end"
    )


class Settings(BaseModel):
    """Main settings model"""
    paging: PagingSettings = Field(default_factory=PagingSettings)


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to the YAML settings file. Defaults to ./pagedlist.yml
        """
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        if not self.config_path.exists():
            logger.info(f"Settings file not found at {self.config_path}, using defaults")
            return Settings()

        try:
            with open(self.config_path, "r") as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing settings YAML: {e}")
            return Settings()

        if config_data is None:
            logger.info("Settings file is empty, using defaults")
            return Settings()

        try:
            settings = Settings(**config_data)
        except (TypeError, ValidationError) as e:
            logger.error(f"Invalid settings in {self.config_path}: {e}")
            return Settings()

        logger.info(f"Loaded settings from {self.config_path}")
        logger.debug(f"  - Page size: {settings.paging.page_size}")
        return settings

    def reload(self):
        """Reload settings from file"""
        self.settings = self._load_settings()

    def save(self):
        """Save current settings to YAML file"""
        with open(self.config_path, "w") as f:
            yaml.safe_dump(self.settings.model_dump(), f, default_flow_style=False)

    @property
    def page_size(self) -> int:
        return self.settings.paging.page_size

    @property
    def offset(self) -> int:
        return self.settings.paging.offset

    @property
    def load_on_attach(self) -> bool:
        return self.settings.paging.load_on_attach

    @property
    def scroll_threshold(self) -> int:
        return self.settings.paging.scroll_threshold
