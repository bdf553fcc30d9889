"""Input/Output operations for DXF files."""

from .dxf_reader import DXFReader, PolylineEntity, load_dxf
from .dxf_writer import DXFWriter

__all__ = [
    "DXFReader",
    "DXFWriter",
    "PolylineEntity",
    "load_dxf",
]
