"""DXF file reading functionality."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import ezdxf
from ezdxf.document import Drawing

from ..config import SUPPORTED_ENTITY_TYPES
from ..core.models import Point

logger = logging.getLogger(__name__)


@dataclass
class PolylineEntity:
    """Vertex list and closed flag of one polylinear DXF entity."""

    handle: str
    layer: str
    dxftype: str
    points: List[Point]
    closed: bool
    elevation: float = 0.0
    entity: Any = field(default=None, repr=False, compare=False)


class DXFReader:
    """DXF file reader for polyline outlines."""

    def __init__(self, file_path: Optional[Path] = None) -> None:
        """Initialize DXF reader.

        Args:
            file_path: Path to DXF file
        """
        self.file_path = file_path
        self.doc: Optional[Drawing] = None

    @classmethod
    def from_document(cls, doc: Drawing, file_path: Optional[Path] = None) -> "DXFReader":
        """Wrap an already loaded drawing."""
        reader = cls(file_path)
        reader.doc = doc
        return reader

    def load(self) -> None:
        """Load DXF file."""
        try:
            self.doc = ezdxf.readfile(str(self.file_path))
            logger.info(f"Loaded DXF file: {self.file_path}")
        except Exception as e:
            raise ValueError(f"Failed to load DXF file {self.file_path}: {e}")

    def extract_polylines(
        self, layer_name: Optional[str] = None, only_closed: bool = True
    ) -> List[PolylineEntity]:
        """Extract polylines from the drawing's modelspace.

        Args:
            layer_name: Layer to extract from, matched case-insensitively
                (None for all layers)
            only_closed: Skip open polylines

        Returns:
            List of PolylineEntity records
        """
        polylines = []
        for entity in self._iter_polyline_entities(layer_name):
            record = self._to_record(entity)
            if only_closed and not record.closed:
                continue
            polylines.append(record)

        logger.info(f"Extracted {len(polylines)} polylines from DXF")
        return polylines

    def get_layers(self) -> List[str]:
        """Get list of layer names in the DXF file."""
        doc = self._require_doc()
        return [layer.dxf.name for layer in doc.layers]

    def has_layer(self, layer_name: str) -> bool:
        """Check for a layer, ignoring case."""
        wanted = layer_name.lower()
        return any(name.lower() == wanted for name in self.get_layers())

    def get_polyline_count(
        self, layer_name: Optional[str] = None, closed: Optional[bool] = None
    ) -> int:
        """Count polylines in a layer (None for all layers).

        Args:
            layer_name: Layer to count
            closed: Count only closed (True) or open (False) polylines

        Returns:
            Number of polylines
        """
        count = 0
        for entity in self._iter_polyline_entities(layer_name):
            if closed is None or _is_closed(entity) == closed:
                count += 1
        return count

    def get_summary(self) -> Dict[str, Any]:
        """Get summary information about the DXF file."""
        doc = self._require_doc()
        layers = self.get_layers()

        summary: Dict[str, Any] = {
            "file_path": str(self.file_path) if self.file_path else None,
            "dxf_version": doc.dxfversion,
            "layers": layers,
            "total_polylines": self.get_polyline_count(),
            "closed_polylines": self.get_polyline_count(closed=True),
            "polylines_per_layer": {},
        }

        for layer in layers:
            summary["polylines_per_layer"][layer] = {
                "closed": self.get_polyline_count(layer, closed=True),
                "open": self.get_polyline_count(layer, closed=False),
            }

        return summary

    def _require_doc(self) -> Drawing:
        if self.doc is None:
            raise ValueError("DXF file not loaded. Call load() first.")
        return self.doc

    def _iter_polyline_entities(self, layer_name: Optional[str] = None) -> Iterator[Any]:
        msp = self._require_doc().modelspace()
        wanted = layer_name.lower() if layer_name else None

        for entity in msp.query(" ".join(SUPPORTED_ENTITY_TYPES)):
            if wanted and entity.dxf.layer.lower() != wanted:
                continue
            # Polyface and polygon meshes are not outlines
            if entity.dxftype() == "POLYLINE" and not (
                entity.is_2d_polyline or entity.is_3d_polyline
            ):
                continue
            yield entity

    @staticmethod
    def _to_record(entity: Any) -> "PolylineEntity":
        if entity.dxftype() == "LWPOLYLINE":
            # ezdxf returns (x, y, start_width, end_width, bulge); bulges are dropped
            points = [Point(float(x), float(y)) for x, y in entity.get_points("xy")]
            elevation = float(entity.dxf.get("elevation", 0.0))
        else:
            locations = list(entity.points())
            points = [Point(float(v.x), float(v.y)) for v in locations]
            elevation = float(locations[0].z) if locations else 0.0

        return PolylineEntity(
            handle=entity.dxf.handle,
            layer=entity.dxf.layer,
            dxftype=entity.dxftype(),
            points=points,
            closed=_is_closed(entity),
            elevation=elevation,
            entity=entity,
        )


def _is_closed(entity: Any) -> bool:
    if entity.dxftype() == "LWPOLYLINE":
        return bool(entity.closed)
    return bool(entity.is_closed)


def load_dxf(file_path: Path) -> DXFReader:
    """Convenience function: create a reader and load the file.

    Args:
        file_path: Path to DXF file

    Returns:
        Loaded DXFReader
    """
    reader = DXFReader(file_path)
    reader.load()
    return reader
