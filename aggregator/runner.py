"""Orchestrator that configures and drives the aggregation stage."""
from pathlib import Path
from typing import Callable, Optional

import numpy as np
import yaml

from .aggregation import Aggregation, Params
from .clusters import Clusters
from .errors import AggregationCancelled
from .preprocessing.cluster_builder import build_clusters
from .utils.logger import get_logger, set_level

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "config" / "defaults.yaml"


class RegionAggregator:
    """
    Run cluster aggregation end to end.

    Pipeline:
      1. Build clusters (only when given a raw image)
      2. Configure the aggregation processor
      3. Tick until every aggregate was visited
      4. Render the merged raster
    """

    def __init__(self, config: dict = None, config_path: str = None, preset: str = None):
        """
        Initialize with config dict, YAML path, or preset name.

        Args:
            config: Direct config dictionary.
            config_path: Path to YAML config file.
            preset: Preset name ("logo", "illustration", "photograph", "pixelart").
        """
        self.config = self._load_config(config, config_path, preset)
        self.params = Params.from_config(self.config)
        self.progress_interval = self.config.get("runner", {}).get("progress_interval", 1000)
        self.connectivity = self.config.get("clustering", {}).get("connectivity", 1)

        level = self.config.get("logging", {}).get("level")
        if level:
            set_level(level)

    def _load_config(self, config, config_path, preset) -> dict:
        """Load and merge configuration."""
        if DEFAULTS_PATH.exists():
            with open(DEFAULTS_PATH) as f:
                base_config = yaml.safe_load(f) or {}
        else:
            base_config = {}

        if preset:
            presets = base_config.get("presets", {})
            if preset not in presets:
                raise ValueError(f"Unknown preset: {preset}")
            base_config = self._deep_merge(base_config, presets[preset])

        if config_path:
            with open(config_path) as f:
                file_config = yaml.safe_load(f) or {}
            base_config = self._deep_merge(base_config, file_config)

        if config:
            base_config = self._deep_merge(base_config, config)

        return base_config

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Deep merge two dicts. Override takes precedence."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = RegionAggregator._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def aggregate(
        self,
        clusters: Clusters,
        should_continue: Optional[Callable[[], bool]] = None,
        on_progress: Optional[Callable[[int], None]] = None,
    ) -> np.ndarray:
        """
        Merge clusters and render the result.

        Args:
            clusters: Clustering result to merge.
            should_continue: Checked between ticks; returning False cancels.
            on_progress: Called with the completion percentage every
                ``progress_interval`` ticks and once at the end.

        Returns:
            (height, width, 3) uint8 raster.
        """
        processor = Aggregation()
        processor.config(self.params)
        processor.input(clusters)

        ticks = 0
        while not processor.tick():
            ticks += 1
            if should_continue is not None and not should_continue():
                logger.warning(f"Aggregation cancelled after {ticks} ticks")
                raise AggregationCancelled(f"Cancelled at {processor.progress()}%")
            if self.progress_interval and ticks % self.progress_interval == 0:
                percent = processor.progress()
                logger.info(f"  Aggregation {percent}% ({ticks} aggregates visited)")
                if on_progress is not None:
                    on_progress(percent)

        if on_progress is not None:
            on_progress(processor.progress())

        return processor.output()

    def aggregate_image(self, image: np.ndarray, **kwargs) -> np.ndarray:
        """Cluster a flat-colored raster by identical color, then aggregate."""
        logger.info("Step 1/2: Building clusters...")
        clusters = build_clusters(image, connectivity=self.connectivity)
        logger.info("Step 2/2: Aggregating clusters...")
        return self.aggregate(clusters, **kwargs)
