"""Processor that removes small clusters by merging them into larger ones."""
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .clusters import Clusters
from .errors import AggregationContractError
from .grouping.merger import AggregateMerger, DEFAULT_DEVIATION, DEFAULT_MIN_SIZE
from .grouping.partition import PartitionStore, SENTINEL
from .pipeline import Processor
from .utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Params:
    """Aggregation thresholds, fixed before input is accepted."""

    # Allowed color difference between shapes in the same aggregate
    deviation: float = DEFAULT_DEVIATION
    # Minimum patch size in pixels
    min_size: int = DEFAULT_MIN_SIZE

    @classmethod
    def from_config(cls, config: dict) -> "Params":
        agg_cfg = config.get("aggregation", {})
        return cls(
            deviation=float(agg_cfg.get("deviation", DEFAULT_DEVIATION)),
            min_size=int(agg_cfg.get("min_size", DEFAULT_MIN_SIZE)),
        )


class Aggregation(Processor):
    """
    Merge clusters into aggregates, one aggregate per tick.

    Aggregates are visited once each in ascending id order. Neighbours are
    recomputed on every visit so later aggregates see earlier merges.
    """

    def __init__(self):
        self.params = Params()
        self.merger = AggregateMerger(self.params.deviation, self.params.min_size)
        self.store: Optional[PartitionStore] = None
        self.counter = SENTINEL + 1
        self.merges = 0

    @property
    def started(self) -> bool:
        return self.store is not None

    @property
    def done(self) -> bool:
        return self.started and self.counter >= len(self.store)

    def config(self, params: Params) -> bool:
        if self.started:
            raise AggregationContractError("Aggregation cannot be reconfigured after input")
        self.params = params
        self.merger = AggregateMerger(params.deviation, params.min_size)
        return True

    def input(self, data: Clusters) -> bool:
        if self.started:
            raise AggregationContractError("Aggregation accepts input only once")
        self.store = PartitionStore.from_clusters(data)
        self.counter = SENTINEL + 1
        logger.info(
            f"Aggregating {len(data)} clusters on a {data.width}x{data.height} grid "
            f"(deviation={self.params.deviation}, min_size={self.params.min_size})"
        )
        return True

    def tick(self) -> bool:
        if not self.started:
            raise AggregationContractError("tick() called before input()")
        if self.counter >= len(self.store):
            return True

        if self.merger.apply(self.store, self.counter) is not None:
            self.merges += 1
        self.counter += 1
        return False

    def progress(self) -> int:
        # Share of aggregates visited so far, not a constant 100
        if not self.started:
            return 0
        total = len(self.store) - 1
        if total <= 0:
            return 100
        visited = min(self.counter - 1, total)
        return visited * 100 // total

    def output(self) -> np.ndarray:
        """Render the merged partition. Only valid once ticking is done."""
        if not self.done:
            raise AggregationContractError("output() called before aggregation finished")
        logger.info(
            f"Aggregation finished: {self.merges} merges, "
            f"{self.store.live_count()} aggregates remain"
        )
        return self.store.render()
