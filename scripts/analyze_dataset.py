#!/usr/bin/env python3
"""Geospatial fairness analysis script.

Reads a point dataset and optional region boundaries from disk, runs the
fairness analysis, and writes the result as JSON.

Usage:
    python scripts/analyze_dataset.py --data points.csv
    python scripts/analyze_dataset.py --data points.geojson --boundaries regions.geojson --config configs/analysis.yaml
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from geolens.analysis import AnalysisConfig, GeoFairnessAnalyzer, load_config
from geolens.spatial import parse_boundary_collection


# File suffix -> format tag
SUFFIX_FORMATS = {
    ".csv": "tabular",
    ".txt": "tabular",
    ".geojson": "geo-feature-collection",
    ".json": "geo-feature-collection",
}


def infer_format(path: Path) -> str:
    """Infer the dataset format tag from a file suffix."""
    suffix = path.suffix.lower()
    if suffix not in SUFFIX_FORMATS:
        raise ValueError(
            f"Cannot infer format from '{path.name}', pass --format explicitly"
        )
    return SUFFIX_FORMATS[suffix]


def main():
    parser = argparse.ArgumentParser(description="Analyse geographic fairness of a dataset")
    parser.add_argument(
        "--data",
        type=str,
        required=True,
        help="Path to the CSV or GeoJSON dataset",
    )
    parser.add_argument(
        "--format",
        type=str,
        default=None,
        help="Dataset format (tabular, geo-feature-collection); inferred if omitted",
    )
    parser.add_argument(
        "--boundaries",
        type=str,
        default=None,
        help="Path to a GeoJSON FeatureCollection of region polygons",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config file",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON path (prints to stdout if omitted)",
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="INFO",
        help="Log level (DEBUG, INFO, WARNING)",
    )
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    config = load_config(args.config) if args.config else AnalysisConfig()

    data_path = Path(args.data)
    fmt = args.format or infer_format(data_path)

    boundaries = None
    if args.boundaries:
        boundaries = parse_boundary_collection(Path(args.boundaries).read_bytes())
        logger.info(f"Loaded {len(boundaries)} region boundaries from {args.boundaries}")

    analyzer = GeoFairnessAnalyzer(config)
    result = analyzer.analyze(
        data_path.read_bytes(),
        fmt,
        boundaries=boundaries,
        dataset_id=data_path.stem,
    )

    output = result.to_json()
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output)
        logger.info(f"Results saved to {output_path}")
    else:
        print(output)

    print(f"\nFairness index: {result.fairness.fairness_index:.2f} / 10", file=sys.stderr)


if __name__ == "__main__":
    main()
