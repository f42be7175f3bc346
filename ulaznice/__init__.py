"""Console ticket register with per-category baskets for concert and football events."""

__version__ = "1.0.0"