""" Command-line settings

Loaded from the environment (and from a `.env` file, if there is one), with the `SHORT_ID_` prefix:

    SHORT_ID_BYTES=16 short-id random
"""

import pydantic as pd
from pydantic_settings import BaseSettings, SettingsConfigDict

from .byte_source import MAX_BYTES
from .generator import DEFAULT_BYTES


class Settings(BaseSettings):
    """ Settings for the `short-id` command """

    # Default number of bytes to make an id from
    BYTES: int = pd.Field(DEFAULT_BYTES, ge=1, le=MAX_BYTES)

    # Log level: DEBUG, INFO, WARNING, ERROR
    LOG_LEVEL: str = 'WARNING'

    model_config = SettingsConfigDict(
        # Use this prefix for environment variable names.
        env_prefix='SHORT_ID_',
        case_sensitive=True,
        env_file='.env',
        extra='ignore',
    )

    @pd.field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str):
        v = v.upper()
        if v not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f'Unknown log level: {v}')
        return v
