from __future__ import annotations

from dataclasses import dataclass

import csvrecord

"""Public API contract: the documented entry points are importable from the package root."""


def test_public_names_exported():
    for name in (
        "get_header",
        "unmarshal_row",
        "unmarshal_rows",
        "unmarshal_frame",
        "frame_rows",
        "ResolvedHeader",
        "ConversionOptions",
        "default_options",
        "load_options",
        "MissingRequiredField",
        "InvalidIntegerValue",
        "InvalidUnsignedValue",
        "InvalidBooleanValue",
    ):
        assert hasattr(csvrecord, name), name
        assert name in csvrecord.__all__


def test_readme_example():
    @dataclass
    class Account:
        name: str = csvrecord.csv_field("name,account_name,required", default="")
        balance: int = csvrecord.csv_field("balance", default=0)
        active: bool = csvrecord.csv_field("active,status", default=False)

    rows = [["status", "account_name", "balance"], ["active", "acme", "10"]]
    header = csvrecord.get_header(rows[0], Account)
    account = Account()
    assert csvrecord.unmarshal_row(header, rows[1], account) is None
    assert account == Account(name="acme", balance=10, active=True)
