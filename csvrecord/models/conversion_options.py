from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

"""ConversionOptions model.

Holds the fallback values assigned to optional fields whose cell is empty and
the literal sets used to classify boolean cells.
"""

__all__ = [
    "TRUE_VALUES",
    "FALSE_VALUES",
    "ConversionOptions",
    "default_options",
]

TRUE_VALUES: tuple[str, ...] = ("t", "true", "1", "active")
FALSE_VALUES: tuple[str, ...] = ("f", "false", "0", "inactive")


@dataclass(frozen=True)
class ConversionOptions:
    """Decode-time conversion settings.

    Boolean literals are compared case-insensitively against the lowercased
    cell text.
    """
    default_int: int = 0
    default_uint: int = 0
    default_bool: bool = False
    default_string: str = ""
    true_values: tuple[str, ...] = TRUE_VALUES
    false_values: tuple[str, ...] = FALSE_VALUES

    def __post_init__(self) -> None:
        # 比較用に小文字化・タプル化 (list で渡されても可)
        object.__setattr__(self, "true_values", tuple(v.lower() for v in self.true_values))
        object.__setattr__(self, "false_values", tuple(v.lower() for v in self.false_values))
        if self.default_uint < 0:
            raise ValueError(f"default_uint must be non-negative, got {self.default_uint}")

    def with_overrides(self, **changes: Any) -> ConversionOptions:
        return replace(self, **changes)


_DEFAULT_OPTIONS = ConversionOptions()


def default_options() -> ConversionOptions:
    """Return the documented default configuration."""
    return _DEFAULT_OPTIONS
