from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest

from csvrecord.models.field_descriptor import FieldKind
from csvrecord.models.record_shape import CSV_TAG, FieldSpec, RecordShape, Unsigned, csv_field, shape_of


@dataclass
class Sample:
    name: str = csv_field("name", default="")
    count: int = csv_field("count", default=0)
    total: Unsigned = csv_field("total", default=Unsigned(0))
    flag: bool = csv_field("flag", default=False)
    ratio: float = 0.0
    maybe: Optional[int] = None
    maybe_new: str | None = None
    tags: list[int] = field(default_factory=list)
    plain_meta: int = field(default=0, metadata={CSV_TAG: "pm,required"})
    forced: str = csv_field("forced", default="", kind=FieldKind.UNSUPPORTED)
    byte: int = csv_field("byte", default=0, bits=8)


def test_kinds_from_annotations():
    shape = RecordShape.from_dataclass(Sample)
    kinds = {f.name: f.kind for f in shape.fields}
    assert kinds == {
        "name": FieldKind.STRING,
        "count": FieldKind.INT,
        "total": FieldKind.UINT,
        "flag": FieldKind.BOOL,
        "ratio": FieldKind.UNSUPPORTED,
        "maybe": FieldKind.INT,
        "maybe_new": FieldKind.STRING,
        "tags": FieldKind.UNSUPPORTED,
        "plain_meta": FieldKind.INT,
        "forced": FieldKind.UNSUPPORTED,
        "byte": FieldKind.INT,
    }


def test_directives_and_bits():
    shape = RecordShape.from_dataclass(Sample)
    by_name = {f.name: f for f in shape.fields}
    assert by_name["name"].directive == "name"
    assert by_name["ratio"].directive is None
    assert by_name["plain_meta"].directive == "pm,required"
    assert by_name["byte"].bits == 8
    assert by_name["count"].bits == 64


def test_shape_is_cached_per_class():
    assert RecordShape.from_dataclass(Sample) is RecordShape.from_dataclass(Sample)


def test_shape_of_variants():
    shape = RecordShape.from_dataclass(Sample)
    assert shape_of(shape) is shape
    assert shape_of(Sample) is shape
    assert shape_of(Sample()) is shape


def test_from_dataclass_rejects_plain_class():
    class NotData:
        pass

    with pytest.raises(TypeError):
        RecordShape.from_dataclass(NotData)


def test_default_setter_assigns_attribute():
    shape = RecordShape.from_dataclass(Sample)
    s = Sample()
    shape.setter(1)(s, 12)
    assert s.count == 12


def test_custom_setters_must_match_fields():
    with pytest.raises(ValueError):
        RecordShape(dict, [FieldSpec("a", FieldKind.STRING)], setters=[])


@pytest.mark.parametrize("bits", [0, 65, -8])
def test_field_spec_rejects_bad_width(bits):
    with pytest.raises(ValueError):
        FieldSpec("a", FieldKind.INT, bits=bits)


def test_csv_field_keeps_extra_metadata():
    f = csv_field("x", default="", metadata={"doc": "d"})
    assert f.metadata[CSV_TAG] == "x"
    assert f.metadata["doc"] == "d"
