"""Summary metrics computed on grid snapshots."""

from schelling_grid.metrics.spatial import happy_fraction, same_color_adjacency_fraction

__all__ = ["happy_fraction", "same_color_adjacency_fraction"]
