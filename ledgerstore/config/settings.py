"""
Configuration Management for Ledger Store

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: The store path handed to load/save is always explicit.
Settings only provide defaults (where the session keeps its file) and
policy (how strictly malformed records are treated, how saves hit disk).
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MalformedRecordPolicy(str, Enum):
    """What the decoder does with a record it cannot build."""
    RAISE = "raise"  # Fail the whole decode
    SKIP = "skip"    # Drop the record, log a warning


class StoreSettings(BaseSettings):
    """
    Store settings.

    Loads configuration from LEDGER_STORE_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    store_path: str = Field(
        default="andromeda8finance_data.json",
        description="Default store file used by a LedgerSession"
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of the store file"
    )

    # Write behaviour
    atomic_writes: bool = Field(
        default=True,
        description="Write to a temporary file and rename over the store"
    )
    fsync: bool = Field(
        default=True,
        description="fsync the temporary file and its directory on atomic writes"
    )
    temp_suffix: str = Field(
        default=".tmp",
        min_length=1,
        description="Suffix of the temporary file used by atomic writes"
    )

    # Decode behaviour
    on_malformed_record: MalformedRecordPolicy = Field(
        default=MalformedRecordPolicy.RAISE,
        description="raise: fail the decode, skip: drop the bad record"
    )

    # Encode layout
    indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Spaces per nesting level in the encoded store"
    )

    @field_validator('store_path')
    @classmethod
    def validate_store_path(cls, v: str) -> str:
        """Reject an empty path early; the file itself may not exist yet."""
        if not v.strip():
            raise ValueError("store_path must be a non-empty path")
        return v


@lru_cache()
def get_settings() -> StoreSettings:
    """
    Get store settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return StoreSettings()
