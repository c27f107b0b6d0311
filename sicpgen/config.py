"""sicpgen configuration.

Typed settings for the generator.  All values have defaults matching the
templates shipped with the package; the environment can relocate the
template directory or change the log level without touching code.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class Config(BaseModel):
    """Global sicpgen configuration.

    Created once by the CLI entry point (usually via ``from_env``) and passed
    to the renderer and the generator.
    """

    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    readme_template: str = Field(default="readme.md.tpl")
    test_template: str = Field(default="test.rkt.tpl")
    readme_filename: str = Field(default="README.md")
    test_filename: str = Field(default="test.rkt")
    log_level: str = Field(default="WARNING", description="Standard logging level name")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def required_templates(self) -> tuple[str, str]:
        """Template names that must load before any command runs."""
        return (self.readme_template, self.test_template)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SICPGEN_TEMPLATE_DIR, SICPGEN_LOG_LEVEL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SICPGEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["SICPGEN_TEMPLATE_DIR"])
        if os.environ.get("SICPGEN_LOG_LEVEL"):
            kwargs["log_level"] = os.environ["SICPGEN_LOG_LEVEL"]
        return cls(**kwargs)
