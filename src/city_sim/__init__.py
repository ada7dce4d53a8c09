"""City Sim - a tile-grid zoning simulation of a small city."""

__version__ = "0.1.0"
