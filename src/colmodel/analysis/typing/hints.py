"""Name hints for type inference.

This module guesses a column's semantic type and subtype from its NAME.
Hints are defined in config/name_hints.yaml and tried in order; the first
matching hint whose type is allowed wins.

Values are never inspected here. Value-based refinement (numeric repair,
ENUM demotion, date detection) happens after the name-based guess.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, cast

import yaml

from colmodel.core.config import get_settings
from colmodel.core.models.base import VarSubType, VarType


class NoSuitableTypeError(ValueError):
    """No type could be guessed for a column and SCALAR is not allowed."""

    def __init__(self, column_name: str, unallowed_types: Iterable[VarType]):
        self.column_name = column_name
        self.unallowed_types = list(unallowed_types)
        super().__init__(
            f"No suitable variable type found for {column_name!r} "
            f"(unallowed: {', '.join(t.value for t in self.unallowed_types)})"
        )


@dataclass
class NameHint:
    """A single hint mapping a column name pattern to a type or subtype."""

    name: str
    pattern: str
    type: VarType | VarSubType
    examples: list[str] | None = None

    # Compiled regex (set in __post_init__)
    _regex: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Compile regex pattern."""
        self._regex = re.compile(self.pattern, re.IGNORECASE)

    def matches(self, column_name: str) -> bool:
        """Check if a column name matches this hint.

        Args:
            column_name: Column name to check, eg. 'Time (AEST)'

        Returns:
            True if the pattern is found in the name
        """
        if not column_name:
            return False
        return self._regex.search(column_name) is not None


class HintConfig:
    """Name hint configuration.

    Loads type and subtype hints from YAML configuration and applies them to
    column names.
    """

    def __init__(self, config_dict: dict[str, object]):
        self._config = config_dict
        self.type_hints = self._load_hints("type_hints", VarType)
        self.subtype_hints = self._load_hints("subtype_hints", VarSubType)

    def _load_hints(
        self, category: str, enum_cls: type[VarType] | type[VarSubType]
    ) -> list[NameHint]:
        hints: list[NameHint] = []
        hint_dicts = cast(list[dict[str, Any]], self._config.get(category) or [])
        for hint_dict in hint_dicts:
            try:
                hints.append(
                    NameHint(
                        name=hint_dict["name"],
                        pattern=hint_dict["pattern"],
                        type=enum_cls[hint_dict["type"]],
                        examples=hint_dict.get("examples"),
                    )
                )
            except KeyError:
                # Skip invalid hints
                continue
        return hints

    def guess_type(self, column_name: str, unallowed_types: Iterable[VarType] = ()) -> VarType:
        """Guess the best variable type from a column name.

        Args:
            column_name: The column name, eg. 'Start date (AEST)'
            unallowed_types: Types not to consider

        Returns:
            The guessed type, SCALAR if no hint matches

        Raises:
            NoSuitableTypeError: If no hint matches and SCALAR is unallowed
        """
        unallowed = list(unallowed_types)
        guess = apply_hints_to_name(self.type_hints, column_name, unallowed)
        if guess is None:
            if VarType.SCALAR in unallowed:
                raise NoSuitableTypeError(column_name, unallowed)
            return VarType.SCALAR
        return cast(VarType, guess)

    def guess_subtype(self, column_name: str) -> VarSubType | None:
        """Guess the variable subtype from a column name, or None."""
        return cast(VarSubType | None, apply_hints_to_name(self.subtype_hints, column_name, []))


def apply_hints_to_name(
    hints: list[NameHint],
    column_name: str,
    unallowed_types: Iterable[VarType | VarSubType],
) -> VarType | VarSubType | None:
    """Return the type of the first matching, allowed hint.

    Args:
        hints: Ordered hints to try
        column_name: The column name
        unallowed_types: Types not to consider; pass [] to consider all

    Returns:
        The hinted type, or None if no allowed hint matches
    """
    unallowed = set(unallowed_types)
    for hint in hints:
        if hint.matches(column_name) and hint.type not in unallowed:
            return hint.type
    return None


def load_hint_config(config_path: Path | None = None) -> HintConfig:
    """Load name hint configuration from YAML.

    Args:
        config_path: Optional path to config file. If None, uses default from settings.

    Returns:
        HintConfig instance
    """
    if config_path is None:
        settings = get_settings()
        config_path = settings.config_path / "name_hints.yaml"

    with open(config_path) as f:
        config_dict = yaml.safe_load(f)

    return HintConfig(config_dict or {})


@lru_cache
def get_hint_config() -> HintConfig:
    """Get the cached default hint configuration."""
    return load_hint_config()
