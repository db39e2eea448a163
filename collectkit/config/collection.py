"""Collection Configuration

This module defines the collection package settings with strict typing and
validation. Values are read from COLLECTKIT_* environment variables.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


class CollectionSettings(BaseModel):
    """Collection settings with validation."""
    
    log_level: str = Field(
        default_factory=lambda: os.getenv("COLLECTKIT_LOG_LEVEL", "WARNING"),
        description="Level of the collectkit logger"
    )
    log_format: str = Field(
        default='[%(asctime)s] %(levelname)s in %(name)s: %(message)s',
        description="Format of records written by the default handler"
    )
    json_ensure_ascii: bool = Field(
        default_factory=lambda: _env_flag("COLLECTKIT_JSON_ENSURE_ASCII"),
        description="Escape non-ASCII characters in to_json() output"
    )
    json_sort_keys: bool = Field(
        default_factory=lambda: _env_flag("COLLECTKIT_JSON_SORT_KEYS"),
        description="Sort object keys in to_json() output"
    )
    random_seed: Optional[int] = Field(
        default_factory=lambda: os.getenv("COLLECTKIT_RANDOM_SEED"),
        description="Seed for random() sampling; unset means system entropy"
    )
    
    model_config = ConfigDict(validate_default=True)
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f'Unknown log level: {v}')
        return level
    
    @field_validator('random_seed', mode='before')
    @classmethod
    def validate_random_seed(cls, v: Any) -> Any:
        """Treat an empty seed as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
    
    def get_log_level(self) -> int:
        """Get the numeric logging level."""
        return logging.getLevelNamesMapping()[self.log_level]
    
    def json_options(self) -> dict[str, Any]:
        """Get default keyword options for json.dumps."""
        return {
            'ensure_ascii': self.json_ensure_ascii,
            'sort_keys': self.json_sort_keys,
        }


# Create global settings instance
collection_settings = CollectionSettings()


def get_collection_settings() -> CollectionSettings:
    """Get collection settings instance."""
    return collection_settings
