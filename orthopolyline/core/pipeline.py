"""DXF orthogonalization pipeline."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ezdxf.document import Drawing

from ..config import DEFAULT_STRATEGY
from ..geometry import OrthogonalityValidator, OrthogonalizerFactory, ValidationResult
from ..io import DXFReader, DXFWriter, PolylineEntity
from .models import OrthogonalizeSettings, Point

logger = logging.getLogger(__name__)


@dataclass
class EntityResult:
    """Outcome for one DXF polyline."""

    handle: str
    layer: str
    dxftype: str
    closed: bool
    original_points: List[Point]
    output_points: List[Point]
    processed: bool
    message: str
    validation: Optional[ValidationResult] = None

    @property
    def points_removed(self) -> int:
        return len(self.original_points) - len(self.output_points)


@dataclass
class PipelineResult:
    """Complete result of an orthogonalization run."""

    input_file: Optional[str]
    output_file: Optional[str]
    layer_name: Optional[str]
    strategy: str
    settings: OrthogonalizeSettings
    entities: List[EntityResult] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def processed_count(self) -> int:
        return sum(1 for e in self.entities if e.processed)

    @property
    def skipped_count(self) -> int:
        return sum(1 for e in self.entities if not e.processed)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def summary(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy,
            "layer": self.layer_name,
            "polylines_found": len(self.entities),
            "polylines_processed": self.processed_count,
            "polylines_skipped": self.skipped_count,
            "points_in": sum(len(e.original_points) for e in self.entities),
            "points_out": sum(
                len(e.output_points) for e in self.entities if e.processed
            ),
            "warnings": len(self.warnings),
            "errors": len(self.errors),
        }


class OrthogonalizationPipeline:
    """Load a drawing, orthogonalize its polylines and save the result."""

    def __init__(
        self,
        strategy: str = DEFAULT_STRATEGY,
        settings: Optional[OrthogonalizeSettings] = None,
        only_closed: bool = True,
        validate: bool = True,
    ) -> None:
        """Initialize pipeline.

        Args:
            strategy: Orthogonalization strategy code
            settings: Tuning parameters
            only_closed: Leave open polylines untouched
            validate: Attach a validation result to each processed polyline
        """
        self.settings = settings or OrthogonalizeSettings()
        self.strategy = strategy
        self.orthogonalizer = OrthogonalizerFactory.create(strategy, self.settings)
        self.only_closed = only_closed
        self.validator = (
            OrthogonalityValidator(
                min_edge_length=self.settings.min_edge_length,
                require_orthogonal=strategy == "simplify_fit",
            )
            if validate
            else None
        )

    def run(
        self,
        input_file: Union[str, Path],
        output_file: Union[str, Path],
        layer_name: Optional[str] = None,
    ) -> PipelineResult:
        """Run the pipeline from file to file.

        Args:
            input_file: Path to DXF input file
            output_file: Path for the modified drawing
            layer_name: Restrict processing to this layer (None for all)

        Returns:
            PipelineResult

        Raises:
            ValueError: If the drawing cannot be loaded or saved
        """
        reader = DXFReader(Path(input_file))
        reader.load()

        result = self.process_document(reader.doc, layer_name, reader=reader)
        result.input_file = str(input_file)

        DXFWriter(reader.doc).save(Path(output_file))
        result.output_file = str(output_file)

        logger.info(
            f"Processed {result.processed_count} of {len(result.entities)} polylines"
        )
        return result

    def process_document(
        self,
        doc: Drawing,
        layer_name: Optional[str] = None,
        reader: Optional[DXFReader] = None,
    ) -> PipelineResult:
        """Orthogonalize polylines of an in-memory drawing.

        Args:
            doc: Drawing to modify in place
            layer_name: Restrict processing to this layer (None for all)
            reader: Reader already wrapping doc

        Returns:
            PipelineResult (input_file/output_file unset)
        """
        reader = reader or DXFReader.from_document(doc)
        writer = DXFWriter(doc)
        result = PipelineResult(
            input_file=None,
            output_file=None,
            layer_name=layer_name,
            strategy=self.strategy,
            settings=self.settings,
        )

        if layer_name and not reader.has_layer(layer_name):
            message = f"Layer '{layer_name}' not found in DXF file"
            logger.warning(message)
            result.warnings.append(message)
            return result

        for record in reader.extract_polylines(layer_name, self.only_closed):
            entity_result = self.process_entity(record, writer)
            result.entities.append(entity_result)
            if not entity_result.processed:
                result.warnings.append(
                    f"{record.dxftype} {record.handle} not processed: "
                    f"{entity_result.message}"
                )

        return result

    def process_entity(self, record: PolylineEntity, writer: DXFWriter) -> EntityResult:
        """Orthogonalize one polyline and write it back when usable."""
        cleaned = self.orthogonalizer.orthogonalize(record.points, record.closed)

        entity_result = EntityResult(
            handle=record.handle,
            layer=record.layer,
            dxftype=record.dxftype,
            closed=record.closed,
            original_points=list(record.points),
            output_points=cleaned,
            processed=False,
            message="",
        )

        if len(cleaned) < 2:
            entity_result.message = f"orthogonalization left {len(cleaned)} point(s)"
            logger.warning(
                f"Skipping {record.dxftype} {record.handle}: {entity_result.message}"
            )
            return entity_result

        writer.replace_vertices(record, cleaned, record.closed)
        entity_result.processed = True
        entity_result.message = f"{len(record.points)} -> {len(cleaned)} points"

        if self.validator is not None:
            entity_result.validation = self.validator.validate(
                cleaned, record.closed, original=record.points
            )

        logger.debug(f"{record.dxftype} {record.handle}: {entity_result.message}")
        return entity_result
