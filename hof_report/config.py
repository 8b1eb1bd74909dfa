"""Configuration settings for the Hall of Fame recipe report."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml


DEFAULT_NUTRITION_COLUMNS = ["calories", "fat", "carbohydrate", "protein"]

DEFAULT_CORRELATION_COLUMNS = [
    "year",
    "servings",
    "calories",
    "fat",
    "carbohydrate",
    "protein",
    "readyin",
    "madeit",
    "photos",
]

DEFAULT_YEARLY_COLUMNS = ["servings", "calories", "fat", "carbohydrate", "protein"]


class Config:
    """Central configuration class that loads from config.yaml."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration from YAML file."""
        if config_path is None:
            # Look for config.yaml in the project root
            config_path = Path(__file__).parent.parent / "config.yaml"

        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, "r") as f:
                self._config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML configuration: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with dot notation support."""
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def data_dir(self) -> Path:
        """Get data directory path."""
        return Path(os.getenv("DATA_DIR", self.get("paths.data_dir", "data")))

    @property
    def outputs_dir(self) -> Path:
        """Get outputs directory path."""
        return Path(os.getenv("OUTPUT_DIR", self.get("paths.outputs_dir", "outputs")))

    @property
    def logs_dir(self) -> Path:
        return Path(self.get("paths.logs_dir", "logs"))

    # Dataset properties
    @property
    def dataset_filename(self) -> str:
        return self.get("dataset.filename", "hall_of_fame_recipes.csv")

    @property
    def dataset_path(self) -> Path:
        return self.data_dir / self.dataset_filename

    @property
    def nutrition_columns(self) -> List[str]:
        return self.get("dataset.nutrition_columns", DEFAULT_NUTRITION_COLUMNS)

    @property
    def correlation_columns(self) -> List[str]:
        return self.get("dataset.correlation_columns", DEFAULT_CORRELATION_COLUMNS)

    @property
    def yearly_columns(self) -> List[str]:
        return self.get("dataset.yearly_columns", DEFAULT_YEARLY_COLUMNS)

    # Text properties
    @property
    def min_title_frequency(self) -> int:
        return self.get("text.min_title_frequency", 5)

    @property
    def min_description_frequency(self) -> int:
        return self.get("text.min_description_frequency", 10)

    @property
    def max_words(self) -> int:
        return self.get("text.max_words", 200)

    @property
    def top_words(self) -> int:
        return self.get("text.top_words", 15)

    # Plot properties
    @property
    def plot_dpi(self) -> int:
        return self.get("plots.dpi", 150)

    @property
    def log_level(self) -> str:
        return os.getenv("LOG_LEVEL", self.get("environment.log_level", "INFO"))

