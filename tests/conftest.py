"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Callable, List, Sequence, Tuple

import ezdxf
import matplotlib
import numpy as np
import pytest

from orthopolyline.core.models import Point

matplotlib.use("Agg")

NOISY_RECTANGLE = [
    (0.0, 0.1),
    (5.2, 0.3),
    (10.1, 0.2),
    (10.3, 5.1),
    (10.2, 10.0),
    (5.0, 10.2),
    (0.1, 10.1),
    (0.2, 5.0),
]

NOISY_L = [
    (0.0, 0.0),
    (1.1, 0.2),
    (5.0, 0.1),
    (5.2, 3.1),
    (5.1, 7.0),
]

# Rectilinear outlines with edges in multiples of 10, starting at a corner
RECTILINEAR_SHAPES = {
    "rectangle": [(0, 0), (40, 0), (40, 20), (0, 20)],
    "l_shape": [(0, 0), (30, 0), (30, 10), (10, 10), (10, 30), (0, 30)],
    "staircase": [
        (0, 0),
        (30, 0),
        (30, 10),
        (20, 10),
        (20, 20),
        (10, 20),
        (10, 30),
        (0, 30),
    ],
    "u_shape": [
        (0, 0),
        (30, 0),
        (30, 30),
        (20, 30),
        (20, 10),
        (10, 10),
        (10, 30),
        (0, 30),
    ],
}


@pytest.fixture
def noisy_rectangle() -> List[Point]:
    """Hand-digitized 10x10 square, closed."""
    return [Point(x, y) for x, y in NOISY_RECTANGLE]


@pytest.fixture
def noisy_l() -> List[Point]:
    """Hand-digitized L-shaped open polyline."""
    return [Point(x, y) for x, y in NOISY_L]


@pytest.fixture
def rectilinear_shapes():
    """Corner lists of clean rectilinear outlines."""
    return RECTILINEAR_SHAPES


@pytest.fixture
def make_noisy_outline() -> Callable[..., List[Point]]:
    """Return a factory sampling a closed rectilinear outline with jitter."""

    def factory(
        corners: Sequence[Tuple[float, float]],
        spacing: float = 5.0,
        noise: float = 0.2,
        seed: int = 0,
    ) -> List[Point]:
        rng = np.random.default_rng(seed)
        samples = []
        n = len(corners)
        for i in range(n):
            x0, y0 = corners[i]
            x1, y1 = corners[(i + 1) % n]
            length = float(np.hypot(x1 - x0, y1 - y0))
            steps = int(round(length / spacing))
            for k in range(steps):
                t = k / steps
                samples.append((x0 + t * (x1 - x0), y0 + t * (y1 - y0)))

        jitter = rng.uniform(-noise, noise, size=(len(samples), 2))
        return [Point(x + dx, y + dy) for (x, y), (dx, dy) in zip(samples, jitter)]

    return factory


@pytest.fixture
def noisy_dxf_doc(noisy_rectangle, noisy_l, make_noisy_outline):
    """Drawing with closed, open, 3D and degenerate polylines."""
    doc = ezdxf.new("R2010")
    doc.layers.add("OUTLINE")
    doc.layers.add("OTHER")
    msp = doc.modelspace()

    msp.add_lwpolyline(
        [p.to_tuple() for p in noisy_rectangle],
        format="xy",
        close=True,
        dxfattribs={"layer": "OUTLINE"},
    )
    msp.add_lwpolyline(
        [p.to_tuple() for p in noisy_l],
        format="xy",
        close=False,
        dxfattribs={"layer": "OUTLINE"},
    )
    # Every vertex identical: cannot be rebuilt
    msp.add_lwpolyline(
        [(3.0, 3.0)] * 4, format="xy", close=True, dxfattribs={"layer": "OUTLINE"}
    )

    staircase = make_noisy_outline(RECTILINEAR_SHAPES["staircase"], seed=7)
    msp.add_polyline3d(
        [(p.x, p.y, 5.0) for p in staircase],
        close=True,
        dxfattribs={"layer": "OTHER"},
    )
    return doc


@pytest.fixture
def noisy_dxf_path(tmp_path, noisy_dxf_doc) -> Path:
    """Write the noisy drawing to a temporary file."""
    path = tmp_path / "input.dxf"
    noisy_dxf_doc.saveas(path)
    return path
