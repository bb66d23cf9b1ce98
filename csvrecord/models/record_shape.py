from __future__ import annotations

import dataclasses
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, NewType

from .field_descriptor import FieldKind

"""Explicit record shape tables.

A RecordShape lists the fields of a record type in declaration order together
with their coercion kind and mapping directive. It is built once per record
type (either by hand or derived from a dataclass) and reused for every header
resolution of that type.
"""

__all__ = [
    "CSV_TAG",
    "Unsigned",
    "FieldSpec",
    "RecordShape",
    "csv_field",
    "shape_of",
]

# Metadata key holding the mapping directive on dataclass fields
CSV_TAG = "csv"

Unsigned = NewType("Unsigned", int)

_KIND_BY_ANNOTATION: dict[Any, FieldKind] = {
    int: FieldKind.INT,
    Unsigned: FieldKind.UINT,
    str: FieldKind.STRING,
    bool: FieldKind.BOOL,
}


@dataclass(frozen=True)
class FieldSpec:
    """One declared field of a record type."""
    name: str
    kind: FieldKind
    directive: str | None = None  # None: field carries no mapping directive
    bits: int = 64

    def __post_init__(self) -> None:
        if self.bits <= 0 or self.bits > 64:
            raise ValueError(f"field '{self.name}': bits must be in 1..64, got {self.bits}")


def csv_field(directive: str = "", *, bits: int = 64, kind: FieldKind | None = None, **kwargs: Any) -> Any:
    """dataclasses.field() carrying a mapping directive in its metadata.

    Example:
        >>> @dataclass
        ... class Person:
        ...     name: str = csv_field("name,full_name,required", default="")
        ...     age: int = csv_field("age", default=0)
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[CSV_TAG] = directive
    if bits != 64:
        metadata["bits"] = bits
    if kind is not None:
        metadata["kind"] = kind
    return dataclasses.field(metadata=metadata, **kwargs)


def _kind_for(annotation: Any) -> FieldKind:
    kind = _KIND_BY_ANNOTATION.get(annotation)
    if kind is not None:
        return kind
    # Optional[X] / X | None
    args = [a for a in typing.get_args(annotation) if a is not type(None)]
    if len(args) == 1 and len(typing.get_args(annotation)) == 2:
        return _KIND_BY_ANNOTATION.get(args[0], FieldKind.UNSUPPORTED)
    return FieldKind.UNSUPPORTED


class RecordShape:
    """Ordered field table for one record type.

    Values are assigned through ``setter(field_index)``, which by default sets
    the attribute of the same name on the target record.
    """

    def __init__(
        self,
        record_type: type | None,
        fields: Sequence[FieldSpec],
        setters: Sequence[Callable[[Any, Any], None]] | None = None,
    ) -> None:
        self.record_type = record_type
        self.fields: tuple[FieldSpec, ...] = tuple(fields)
        if setters is None:
            self._setters = tuple(_attribute_setter(f.name) for f in self.fields)
        else:
            if len(setters) != len(self.fields):
                raise ValueError("setters must match fields one to one")
            self._setters = tuple(setters)

    def __len__(self) -> int:
        return len(self.fields)

    def __repr__(self) -> str:
        type_name = self.record_type.__name__ if self.record_type is not None else None
        return f"RecordShape({type_name}, fields={[f.name for f in self.fields]})"

    def setter(self, field_index: int) -> Callable[[Any, Any], None]:
        return self._setters[field_index]

    @staticmethod
    def from_dataclass(cls: type) -> RecordShape:
        """Derive the shape of a dataclass (cached per class)."""
        if not isinstance(cls, type) or not dataclasses.is_dataclass(cls):
            raise TypeError(f"expected a dataclass type, got {cls!r}")
        return _dataclass_shape(cls)


def _attribute_setter(name: str) -> Callable[[Any, Any], None]:
    def _set(target: Any, value: Any) -> None:
        setattr(target, name, value)
    return _set


@lru_cache(maxsize=None)
def _dataclass_shape(cls: type) -> RecordShape:
    hints = typing.get_type_hints(cls)
    specs: list[FieldSpec] = []
    for f in dataclasses.fields(cls):
        if "kind" in f.metadata:
            kind = f.metadata["kind"]
        else:
            kind = _kind_for(hints.get(f.name, f.type))
        specs.append(
            FieldSpec(
                name=f.name,
                kind=kind,
                directive=f.metadata.get(CSV_TAG),
                bits=f.metadata.get("bits", 64),
            )
        )
    return RecordShape(cls, specs)


def shape_of(record: Any) -> RecordShape:
    """Return the RecordShape for a shape, a dataclass type or a dataclass instance."""
    if isinstance(record, RecordShape):
        return record
    if isinstance(record, type):
        return RecordShape.from_dataclass(record)
    if dataclasses.is_dataclass(record):
        return RecordShape.from_dataclass(type(record))
    raise TypeError(f"cannot derive a record shape from {type(record).__name__}")
