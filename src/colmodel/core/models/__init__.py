"""Shared models."""

from colmodel.core.models.base import CellValue, Result, VarSubType, VarType

__all__ = [
    "CellValue",
    "Result",
    "VarSubType",
    "VarType",
]
