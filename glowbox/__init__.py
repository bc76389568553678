"""Mesh generation, text layout, PNG loading, scene graph, keyframe and timing utilities for Glowbox."""

__version__ = "0.1.0"