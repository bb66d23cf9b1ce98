"""Domain models for the csvrecord row mapper.

This package contains the model classes shared by header resolution, row
decoding and batch processing.
"""

from .conversion_options import ConversionOptions, default_options
from .decode_result import DecodeResult
from .error_record import ErrorRecord
from .field_descriptor import UNRESOLVED, FieldDescriptor, FieldKind
from .record_shape import CSV_TAG, FieldSpec, RecordShape, Unsigned, csv_field, shape_of

__all__ = [
    # Field mapping
    "CSV_TAG",
    "FieldKind",
    "FieldDescriptor",
    "FieldSpec",
    "RecordShape",
    "Unsigned",
    "UNRESOLVED",
    "csv_field",
    "shape_of",
    # Conversion
    "ConversionOptions",
    "default_options",
    # Results
    "DecodeResult",
    "ErrorRecord",
]
