import os
from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParsingConfig(BaseModel):
    """Configuration of the statement recognition pipeline."""

    # Component registry names
    segmenter: str = "blank-line"
    identifier_normalizer: str = "none"


class Settings(BaseSettings):
    """Global configuration for the gresql application."""

    # General System
    log_level: str = "INFO"
    log_serialize: bool = False
    workers: int = 1
    encoding: str = "utf-8-sig"
    file_extensions: list[str] = [".sql"]

    # Search & Output
    delimiter: str = ","
    include_select_by_default: bool = False

    parsing: ParsingConfig = ParsingConfig()

    model_config = SettingsConfigDict(env_prefix="GRESQL_", env_file=".env")


def load_settings(config_file: str | None = None) -> Settings:
    """Loads base settings and overrides them from gresql.yaml."""
    base_settings = Settings()

    explicit = config_file is not None or "GRESQL_CONFIG_FILE" in os.environ
    if config_file is None:
        config_file = os.getenv("GRESQL_CONFIG_FILE", "gresql.yaml")

    yaml_path = Path(config_file)
    if yaml_path.exists():
        with open(yaml_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

            if not data:
                return base_settings

            # Override System configuration
            if "system" in data and isinstance(data["system"], dict):
                for key, value in data["system"].items():
                    if hasattr(base_settings, key):
                        setattr(base_settings, key, value)

            # Override Parsing configuration
            if "parsing" in data and isinstance(data["parsing"], dict):
                base_settings.parsing = ParsingConfig(**data["parsing"])
    elif explicit:
        logger.warning("Configuration file '{}' not found, using defaults", yaml_path)
    else:
        logger.debug("Configuration file '{}' not found, using defaults", yaml_path)

    return base_settings


# Global singleton instance
settings = load_settings()
