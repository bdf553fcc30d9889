"""DXF file writing functionality."""

import logging
from pathlib import Path
from typing import Any, List, Optional

import ezdxf
from ezdxf.document import Drawing

from ..config import DEFAULT_DXF_VERSION
from ..core.models import Point
from .dxf_reader import PolylineEntity

logger = logging.getLogger(__name__)


class DXFWriter:
    """Write orthogonalized vertex lists back into a drawing."""

    def __init__(
        self, doc: Optional[Drawing] = None, dxf_version: str = DEFAULT_DXF_VERSION
    ) -> None:
        """Initialize DXF writer.

        Args:
            doc: Drawing to modify (a new one is created if None)
            dxf_version: DXF version for new drawings
        """
        self.doc = doc if doc is not None else ezdxf.new(dxf_version)
        self.msp = self.doc.modelspace()

    def replace_vertices(
        self, record: PolylineEntity, points: List[Point], closed: bool
    ) -> None:
        """Replace an entity's vertices with straight-edged points.

        Args:
            record: Entity record from DXFReader
            points: New vertices in order
            closed: Closed flag to set on the entity
        """
        entity = record.entity
        if entity is None:
            raise ValueError(f"Polyline {record.handle} has no entity reference")

        if record.dxftype == "LWPOLYLINE":
            # Bulge defaults to 0, so every edge becomes straight
            entity.set_points([p.to_tuple() for p in points], format="xy")
            entity.closed = closed
        else:
            self._replace_polyline_vertices(entity, record, points)
            entity.close(closed)

        logger.debug(
            f"Rewrote {record.dxftype} {record.handle} with {len(points)} vertices"
        )

    def add_polyline(
        self, points: List[Point], closed: bool, layer_name: str = "0"
    ) -> Any:
        """Add a new LWPOLYLINE to the modelspace.

        Args:
            points: Vertices
            closed: Whether the polyline is closed
            layer_name: Target layer

        Returns:
            The created entity
        """
        if layer_name not in self.doc.layers:
            self.doc.layers.add(layer_name)
        return self.msp.add_lwpolyline(
            [p.to_tuple() for p in points],
            format="xy",
            close=closed,
            dxfattribs={"layer": layer_name},
        )

    def save(self, file_path: Path) -> None:
        """Save DXF file to disk.

        Args:
            file_path: Output file path
        """
        try:
            self.doc.saveas(str(file_path))
            logger.info(f"Saved DXF file: {file_path}")
        except Exception as e:
            raise ValueError(f"Failed to save DXF file {file_path}: {e}")

    @staticmethod
    def _replace_polyline_vertices(
        entity: Any, record: PolylineEntity, points: List[Point]
    ) -> None:
        count = len(entity.vertices)
        if count:
            entity.delete_vertices(0, count)

        if entity.is_3d_polyline:
            # Flatten onto the plane of the first original vertex
            entity.append_vertices([(p.x, p.y, record.elevation) for p in points])
        else:
            entity.append_vertices([p.to_tuple() for p in points])
