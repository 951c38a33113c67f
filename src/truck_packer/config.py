"""Runtime settings from the environment; reads a local .env via python-dotenv."""

from __future__ import annotations

import logging
import os
from typing import Literal, Optional, Union

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, Field

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    log_level: str = Field(default="INFO")
    debug: bool = Field(default=False, description="Force DEBUG logging")
    cors_origin_regex: str = Field(default=".*")
    default_strategy: Literal["best_fit", "shelf"] = Field(default="best_fit")


def get_settings(env_file: Optional[Union[str, os.PathLike]] = None) -> Settings:
    """
    Read settings from TRUCK_PACKER_* variables.

    Values from `env_file` (default: the nearest .env above the working
    directory) fill in variables missing from the real environment; they
    never override it and os.environ is left untouched.
    """
    path = env_file or find_dotenv(usecwd=True)
    file_values = dotenv_values(path) if path else {}
    env = {**{k: v for k, v in file_values.items() if v is not None}, **os.environ}

    return Settings(
        log_level=env.get("TRUCK_PACKER_LOG_LEVEL", "INFO").strip().upper(),
        debug=env.get("TRUCK_PACKER_DEBUG", "0").strip() == "1",
        cors_origin_regex=env.get("TRUCK_PACKER_CORS_ORIGIN_REGEX", ".*"),
        default_strategy=env.get("TRUCK_PACKER_DEFAULT_STRATEGY", "best_fit").strip().lower(),
    )


def resolve_log_level(settings: Settings) -> int:
    """DEBUG when debug is set, else the named level; unknown names fall back to INFO."""
    if settings.debug:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    level = resolve_log_level(settings)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("truck_packer").setLevel(level)
