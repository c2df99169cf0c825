"""Core module - configuration, logging, and shared models."""

from colmodel.core.config import Settings, get_settings
from colmodel.core.models.base import CellValue, Result, VarSubType, VarType

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models - enums
    "VarSubType",
    "VarType",
    # Models - base data structures
    "CellValue",
    "Result",
]
