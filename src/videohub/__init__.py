"""videohub: in-memory video catalogue served over HTTP."""

__version__ = "0.1.0"
