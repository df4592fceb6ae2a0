"""Shared logger factory."""
import logging
import sys

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_configured = False


def _configure_root(level: int = logging.INFO):
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    root = logging.getLogger("aggregator")
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``aggregator`` namespace."""
    _configure_root()
    if not name.startswith("aggregator"):
        name = f"aggregator.{name}"
    return logging.getLogger(name)


def set_level(level):
    """Set the package log level from a name ("debug") or a logging constant."""
    _configure_root()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger("aggregator").setLevel(level)
