"""Configuration package."""

from ledgerstore.config.settings import (
    MalformedRecordPolicy,
    StoreSettings,
    get_settings,
)

__all__ = [
    "MalformedRecordPolicy",
    "StoreSettings",
    "get_settings",
]
