"""Exceptions raised by the aggregation stage."""


class AggregationError(Exception):
    """Base class for aggregation failures."""


class AggregationContractError(AggregationError):
    """A lifecycle precondition was violated by the caller.

    Raised for programmer errors such as reconfiguring a processor after
    input was accepted, or asking for output before stepping finished.
    """


class AggregationCancelled(AggregationError):
    """The caller asked the runner to stop between two steps."""
