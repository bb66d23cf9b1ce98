from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any, overload

from ..models.field_descriptor import UNRESOLVED, FieldDescriptor
from ..models.record_shape import RecordShape, shape_of

"""Header resolution.

Matches the mapping directive of every record field against a header row and
fixes the column position of each field. The result (ResolvedHeader) is built
once and reused for every data row sharing that header.

Directive syntax: ``alias1[,alias2,...][,required][,omitEmpty]``
- ``-`` excludes the field
- empty (or no directive) uses the field name as the only alias
"""

__all__ = [
    "OMIT_MARKER",
    "MOD_REQUIRED",
    "MOD_OMIT_EMPTY",
    "Directive",
    "parse_directive",
    "ResolvedHeader",
    "get_header",
]

logger = logging.getLogger(__name__)

OMIT_MARKER = "-"
MOD_REQUIRED = "required"
MOD_OMIT_EMPTY = "omitEmpty"
_MODIFIERS = {MOD_REQUIRED, MOD_OMIT_EMPTY}


class Directive:
    """Parsed mapping directive of one field."""

    __slots__ = ("aliases", "required", "omit_empty")

    def __init__(self, aliases: tuple[str, ...], required: bool = False, omit_empty: bool = False) -> None:
        self.aliases = aliases
        self.required = required
        self.omit_empty = omit_empty

    def __repr__(self) -> str:
        return f"Directive(aliases={self.aliases!r}, required={self.required}, omit_empty={self.omit_empty})"


def parse_directive(directive: str | None, field_name: str) -> Directive | None:
    """Parse a mapping directive.

    Returns None when the field is excluded with the omission marker.
    """
    tokens = [t.strip() for t in (directive or "").split(",")]
    if tokens[0] == OMIT_MARKER:
        return None
    if not tokens[0]:
        tokens[0] = field_name

    required = False
    omit_empty = False
    # 末尾の修飾子を順不同で剥がす (先頭トークンは常にエイリアスとして残す)
    while len(tokens) > 1 and tokens[-1] in _MODIFIERS:
        modifier = tokens.pop()
        if modifier == MOD_REQUIRED:
            required = True
        else:
            omit_empty = True
    return Directive(tuple(tokens), required=required, omit_empty=omit_empty)


def _find_column(aliases: Sequence[str], header_row: Sequence[str]) -> int:
    for alias in aliases:
        for position, label in enumerate(header_row):
            if label == alias:
                return position
    return UNRESOLVED


class ResolvedHeader:
    """Ordered field descriptors resolved against one header row.

    Descriptors follow record declaration order, not header order.
    """

    def __init__(self, shape: RecordShape, descriptors: Sequence[FieldDescriptor]) -> None:
        self.shape = shape
        self._descriptors: tuple[FieldDescriptor, ...] = tuple(descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._descriptors)

    @overload
    def __getitem__(self, index: int) -> FieldDescriptor: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[FieldDescriptor, ...]: ...
    def __getitem__(self, index: Any) -> Any:
        return self._descriptors[index]

    def __repr__(self) -> str:
        cols = {d.name: d.row_index for d in self._descriptors}
        return f"ResolvedHeader({cols})"

    def length(self) -> int:
        return len(self._descriptors)

    def header_values(self, field_position: int) -> list[str]:
        """Aliases of the descriptor at ``field_position``."""
        return list(self._descriptors[field_position].header_values)

    def missing(self) -> list[FieldDescriptor]:
        """Descriptors whose aliases matched no header column."""
        return [d for d in self._descriptors if not d.resolved]


def get_header(header_row: Sequence[str], record_shape: Any) -> ResolvedHeader:
    """Resolve the fields of ``record_shape`` against ``header_row``.

    Parameters
    ----------
    header_row: column names, in column order
    record_shape: RecordShape, dataclass type or dataclass instance

    Unresolved fields keep row_index=-1; no error is raised for them.
    """
    shape = shape_of(record_shape)
    descriptors: list[FieldDescriptor] = []
    for field_index, spec in enumerate(shape.fields):
        directive = parse_directive(spec.directive, spec.name)
        if directive is None:
            continue
        row_index = _find_column(directive.aliases, header_row)
        if row_index == UNRESOLVED:
            logger.debug(f"field '{spec.name}' unresolved: aliases={list(directive.aliases)}")
        descriptors.append(
            FieldDescriptor(
                field_index=field_index,
                name=spec.name,
                kind=spec.kind,
                header_values=directive.aliases,
                required=directive.required,
                omit_empty=directive.omit_empty,
                bits=spec.bits,
                row_index=row_index,
            )
        )
    return ResolvedHeader(shape, descriptors)
