"""Merge small or color-similar flat-color clusters into larger aggregates."""
from .aggregation import Aggregation, Params
from .clusters import Cluster, Clusters
from .errors import AggregationCancelled, AggregationContractError, AggregationError
from .runner import RegionAggregator

__all__ = [
    "Aggregation",
    "AggregationCancelled",
    "AggregationContractError",
    "AggregationError",
    "Cluster",
    "Clusters",
    "Params",
    "RegionAggregator",
]

__version__ = "0.1.0"
