"""Configuration management for city search."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv


@dataclass
class DatasetConfig:
    """Dataset location."""

    path: Path = Path("data/cities.txt")


@dataclass
class SearchConfig:
    """Defaults applied when a query omits a parameter."""

    default_radius: float = 100.0
    default_metric: int = 0  # 0 = L2, 1 = Linf, 2 = L1


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Config:
    """Main configuration container."""

    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Load configuration from files and environment variables."""
        # Load .env file if present
        env_file = Path(__file__).parent.parent / ".env"
        if env_file.exists():
            load_dotenv(env_file)

        config = cls()

        if config_dir and config_dir.exists():
            search_file = config_dir / "search.yaml"
            if search_file.exists():
                config._load_yaml(search_file)

        # Override with environment variables
        config._load_from_env()

        return config

    def _load_yaml(self, path: Path) -> None:
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
            if data:
                self._apply_yaml_config(data, base_dir=path.parent)

    def _apply_yaml_config(self, data: dict[str, Any], base_dir: Path | None = None) -> None:
        """Apply YAML configuration data.

        Relative dataset paths are resolved against ``base_dir``.
        """
        if "dataset" in data:
            dataset = data["dataset"]
            if "path" in dataset:
                path = Path(dataset["path"])
                if base_dir is not None and not path.is_absolute():
                    path = base_dir / path
                self.dataset.path = path

        if "search" in data:
            search = data["search"]
            if "default_radius" in search:
                self.search.default_radius = float(search["default_radius"])
            if "default_metric" in search:
                self.search.default_metric = int(search["default_metric"])

        if "logging" in data:
            log = data["logging"]
            if "level" in log:
                self.logging.level = str(log["level"]).upper()

    def _load_from_env(self) -> None:
        """Override configuration from environment variables."""
        if data_file := os.getenv("CITYSEARCH_DATA_FILE"):
            self.dataset.path = Path(data_file)
        if radius := os.getenv("CITYSEARCH_DEFAULT_RADIUS"):
            self.search.default_radius = float(radius)
        if metric := os.getenv("CITYSEARCH_DEFAULT_METRIC"):
            self.search.default_metric = int(metric)
        if level := os.getenv("CITYSEARCH_LOG_LEVEL"):
            self.logging.level = level.upper()


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        config_dir = Path(__file__).parent.parent / "config"
        _config = Config.load(config_dir)
    return _config


def reload_config(config_dir: Path | None = None) -> Config:
    """Reload configuration (useful for testing)."""
    global _config
    _config = Config.load(config_dir)
    return _config
