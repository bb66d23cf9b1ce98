"""csvrecord: map pre-split CSV rows onto typed records by header name.

Typical use::

    @dataclass
    class Account:
        name: str = csv_field("name,account_name,required", default="")
        balance: int = csv_field("balance", default=0)
        active: bool = csv_field("active,status", default=False)

    header = get_header(rows[0], Account)
    for row in rows[1:]:
        account = Account()
        unmarshal_row(header, row, account)
"""

from .config.loader import ConfigError, load_options, options_from_mapping
from .decode.errors import (
    DecodeError,
    IntegerParseError,
    InvalidBooleanValue,
    InvalidIntegerValue,
    InvalidUnsignedValue,
    MissingRequiredField,
)
from .decode.row_decoder import unmarshal_row
from .header.resolver import ResolvedHeader, get_header
from .models import (
    ConversionOptions,
    DecodeResult,
    ErrorRecord,
    FieldDescriptor,
    FieldKind,
    FieldSpec,
    RecordShape,
    Unsigned,
    csv_field,
    default_options,
)
from .services.batch import unmarshal_rows
from .services.frame import frame_rows, unmarshal_frame

__version__ = "0.1.0"

__all__ = [
    "get_header",
    "unmarshal_row",
    "unmarshal_rows",
    "unmarshal_frame",
    "frame_rows",
    "ResolvedHeader",
    "FieldDescriptor",
    "FieldKind",
    "FieldSpec",
    "RecordShape",
    "Unsigned",
    "csv_field",
    "ConversionOptions",
    "default_options",
    "DecodeResult",
    "ErrorRecord",
    "load_options",
    "options_from_mapping",
    "ConfigError",
    "DecodeError",
    "MissingRequiredField",
    "InvalidIntegerValue",
    "InvalidUnsignedValue",
    "InvalidBooleanValue",
    "IntegerParseError",
]
