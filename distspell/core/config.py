"""Configuration management for DistSpell."""

from __future__ import annotations

import json
from argparse import ArgumentParser

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from distspell.core.types import Accuracy
from distspell.distance import list_calculators
from distspell.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for spell checking."""

    algorithm: str = Field("optimized-matrix", description="Edit distance algorithm")
    accuracy: Accuracy = Field(Accuracy.MEDIUM, description="Accuracy level")
    dictionary: str | None = Field(None, description="Word list file")
    top_n: int | None = Field(None, ge=1, description="Top N most common words")
    include: str | None = None
    exclude: str | None = None
    max_results: int | None = Field(None, ge=1, description="Maximum matches displayed")
    recursive_max_length: int = Field(Constants.RECURSIVE_WARN_LENGTH, ge=1)
    jobs: int = Field(1, ge=1, description="Worker processes for ranking")
    verbose: bool = False
    debug: bool = False
    log_file: str | None = None

    @field_validator("algorithm", mode="before")
    @classmethod
    def parse_algorithm(cls, v):
        """Normalize and check the algorithm name against the registry."""
        if not isinstance(v, str):
            raise ValueError(f"algorithm must be a string, got {type(v).__name__}")
        name = v.strip().lower()
        if name not in list_calculators():
            available = ", ".join(list_calculators())
            raise ValueError(f"Unknown algorithm '{v}'. Available algorithms: {available}")
        return name

    @field_validator("accuracy", mode="before")
    @classmethod
    def parse_accuracy(cls, v):
        """Accept accuracy names in any case."""
        return Accuracy.parse(v)

    @model_validator(mode="after")
    def validate_sources(self):
        """Validate cross-field constraints."""
        if self.dictionary and self.top_n:
            raise ValueError("dictionary and top_n are mutually exclusive")
        return self


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "algorithm": get_value("algorithm", "optimized-matrix"),
        "accuracy": get_value("accuracy", Accuracy.MEDIUM.value),
        "dictionary": get_value("dictionary", None),
        "top_n": get_value("top_n", None),
        "include": get_value("include", None),
        "exclude": get_value("exclude", None),
        "max_results": get_value("max_results", None),
        "recursive_max_length": json_config.get(
            "recursive_max_length", Constants.RECURSIVE_WARN_LENGTH
        ),
        "jobs": get_value("jobs", 1),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "log_file": get_value("log_file", None),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
