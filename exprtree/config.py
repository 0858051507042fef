import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "EXPRTREE_"


class Settings(BaseModel):
    precision: int = Field(6, ge=1, le=17)   # significant digits in output
    strict: bool = False                     # reject trailing input
    backend: Literal["descent", "lark"] = "descent"
    show_tree: bool = True
    log_level: str = "WARNING"
    color: bool = True
    prompt: str = "Enter an expression: "

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level '{v}'")
        return v


def load_settings(**overrides) -> Settings:
    """Build settings from EXPRTREE_* environment variables, then `overrides`."""
    values = {}
    for name in Settings.model_fields:
        env = os.environ.get(ENV_PREFIX + name.upper())
        if env is not None:
            values[name] = env
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)
