"""Graph-based image segmentation: Felzenszwalb merging and seeded IFT."""

__version__ = "0.1.0"