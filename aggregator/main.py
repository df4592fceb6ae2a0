"""CLI entry point."""
import argparse
import sys

import numpy as np
from PIL import Image

from .errors import AggregationContractError
from .runner import RegionAggregator
from .utils.logger import get_logger

logger = get_logger("cli")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Cluster Aggregator - Merge small flat-color regions before vectorization"
    )

    parser.add_argument("input", help="Input image path (PNG, quantized)")
    parser.add_argument("output", help="Output image path")

    parser.add_argument(
        "--preset",
        choices=["logo", "illustration", "photograph", "pixelart"],
        default=None,
        help="Use a preset configuration",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to custom YAML config file",
    )
    parser.add_argument(
        "--deviation",
        type=float,
        default=None,
        help="Color distance tolerance (weighted HSV)",
    )
    parser.add_argument(
        "--min-size",
        type=int,
        default=None,
        help="Region area in pixels considered large enough to keep",
    )
    parser.add_argument(
        "--connectivity",
        type=int,
        choices=[1, 2],
        default=None,
        help="Cluster connectivity: 1 = 4-connected, 2 = 8-connected",
    )

    args = parser.parse_args(argv)

    # Build config overrides from CLI args
    overrides = {}

    if args.deviation is not None:
        overrides.setdefault("aggregation", {})["deviation"] = args.deviation
    if args.min_size is not None:
        overrides.setdefault("aggregation", {})["min_size"] = args.min_size
    if args.connectivity is not None:
        overrides.setdefault("clustering", {})["connectivity"] = args.connectivity

    try:
        aggregator = RegionAggregator(
            config=overrides if overrides else None,
            config_path=args.config,
            preset=args.preset,
        )
        with Image.open(args.input) as img:
            image = np.asarray(img.convert("RGB"))

        result = aggregator.aggregate_image(image)
        Image.fromarray(result).save(args.output)
        logger.info(f"Success! Output: {args.output}")

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        sys.exit(1)
    except AggregationContractError:
        raise
    except Exception as e:
        logger.error(f"Aggregation failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
