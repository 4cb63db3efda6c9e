"""
Settings for the truth table front end, read from TRUTHTABLE_* environment
variables or a .env file. The parser and evaluator take no configuration
"""
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Rendering: "digits" prints 1/0, "words" prints True/False
    boolean_style: Literal["digits", "words"] = "digits"
    show_steps: bool = True

    # 2 ** max_variables rows at most
    max_variables: int = 8

    model_config = SettingsConfigDict(env_prefix="TRUTHTABLE_", env_file=".env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def get_settings(**overrides) -> Settings:
    """
    Environment values with ``overrides`` on top, validated together
    """
    return Settings(**overrides)
