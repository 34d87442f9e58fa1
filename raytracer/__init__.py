"""Ray tracing and path tracing of simple 3D scenes, with preset scenes and a PNG-writing command."""

__version__ = "0.1.0"