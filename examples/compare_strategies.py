#!/usr/bin/env python3
"""Compare both strategies on a synthetic hand-digitized floor plan."""

from pathlib import Path

import ezdxf
import numpy as np

from orthopolyline import OrthogonalizationPipeline, OrthogonalizerFactory
from orthopolyline.reporting import generate_json_report
from orthopolyline.visualization import plot_pipeline_result

FLOOR_PLAN = [
    (0, 0),
    (60, 0),
    (60, 25),
    (45, 25),
    (45, 40),
    (20, 40),
    (20, 30),
    (0, 30),
]


def noisy_outline(corners, spacing=2.5, noise=0.4, seed=42):
    """Sample a closed outline every `spacing` units and jitter each point."""
    rng = np.random.default_rng(seed)
    samples = []
    for (x0, y0), (x1, y1) in zip(corners, corners[1:] + corners[:1]):
        steps = max(1, int(round(np.hypot(x1 - x0, y1 - y0) / spacing)))
        for t in np.arange(steps) / steps:
            samples.append((x0 + t * (x1 - x0), y0 + t * (y1 - y0)))
    return (np.array(samples) + rng.uniform(-noise, noise, (len(samples), 2))).tolist()


def main():
    """Write a noisy drawing, run each strategy and save reports."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    input_dxf = output_dir / "floor_plan.dxf"
    doc = ezdxf.new("R2010")
    doc.layers.add("WALLS")
    doc.modelspace().add_lwpolyline(
        noisy_outline(FLOOR_PLAN), format="xy", close=True, dxfattribs={"layer": "WALLS"}
    )
    doc.saveas(input_dxf)
    print(f"Wrote synthetic drawing to {input_dxf}")

    for strategy in OrthogonalizerFactory.get_available_strategies():
        print(f"\n=== {strategy} ===")
        pipeline = OrthogonalizationPipeline(strategy=strategy)
        result = pipeline.run(input_dxf, output_dir / f"floor_plan_{strategy}.dxf", "WALLS")

        for entity in result.entities:
            print(f"{entity.handle}: {entity.message}")
            if entity.validation is not None:
                print(f"  {entity.validation.get_summary()}")
                for key, value in entity.validation.metrics.items():
                    print(f"  {key}: {value:.3f}")

        generate_json_report(result, output_dir / f"report_{strategy}.json")
        image = plot_pipeline_result(
            result, output_dir / f"floor_plan_{strategy}.png", title=strategy
        )
        print(f"Saved plot to {image}")


if __name__ == "__main__":
    main()
