"""Offline path tracer for scenes built from spheres."""

__version__ = "0.1.0"
