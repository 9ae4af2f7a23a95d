"""
Process-wide settings for the PokéAPI client and the MCP server.
Values come from the environment (and a local .env file, if present).
"""

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2/"
DEFAULT_USER_AGENT = "SpringAI-Agent/1.0"
DEFAULT_TIMEOUT = 10.0


class Settings(BaseModel):
    """
    Immutable configuration shared read-only by every tool invocation.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    # Seconds, applied to both connect and read
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    log_level: str = "WARNING"

    @field_validator("base_url")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base_url must not be empty")
        return value if value.endswith("/") else f"{value}/"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Builds Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ after loading .env.

    Returns:
        Settings: Validated, frozen settings.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    values = {}
    if environ.get("POKEAPI_BASE_URL"):
        values["base_url"] = environ["POKEAPI_BASE_URL"]
    if environ.get("POKEAPI_USER_AGENT"):
        values["user_agent"] = environ["POKEAPI_USER_AGENT"]
    if environ.get("POKEAPI_TIMEOUT"):
        values["timeout"] = environ["POKEAPI_TIMEOUT"]
    if environ.get("POKEDEX_MCP_LOG_LEVEL"):
        values["log_level"] = environ["POKEDEX_MCP_LOG_LEVEL"]

    return Settings(**values)
