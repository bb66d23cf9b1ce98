from .batch import unmarshal_rows
from .frame import frame_rows, unmarshal_frame

__all__ = ["unmarshal_rows", "frame_rows", "unmarshal_frame"]
