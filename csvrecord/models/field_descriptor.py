from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""FieldKind enum and FieldDescriptor model.

A FieldDescriptor is produced for every eligible record field when a header row
is resolved. It carries the alias list parsed from the field's mapping
directive, the behavioural flags stripped from the end of that directive and
the column position found in the header row (-1 when no alias matched).
"""

__all__ = [
    "FieldKind",
    "FieldDescriptor",
    "UNRESOLVED",
]

UNRESOLVED = -1


class FieldKind(Enum):
    """Coercion kind of a record field.

    - INT: signed integer, parsed base-10
    - UINT: unsigned integer, parsed with the signed parser then reinterpreted
    - STRING: raw cell text
    - BOOL: matched against the configured true/false literal sets
    - UNSUPPORTED: anything else, ignored at decode time
    """
    INT = "int"
    UINT = "uint"
    STRING = "string"
    BOOL = "bool"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FieldDescriptor:
    """Resolved mapping between one record field and one header column."""
    field_index: int  # position in the record shape
    name: str  # declared field name
    kind: FieldKind
    header_values: tuple[str, ...]  # aliases in declared order
    required: bool = False
    omit_empty: bool = False
    bits: int = 64  # integer width used when assigning INT/UINT values
    row_index: int = UNRESOLVED  # column position in the header row

    @property
    def resolved(self) -> bool:
        return self.row_index != UNRESOLVED
