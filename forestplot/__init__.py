"""Geometry for 2D and 3D mathematical plots: curves, contours, surfaces, tubes, views and scenes."""

__version__ = "0.1.0"