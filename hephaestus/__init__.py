"""Generic 2D and 3D vector types with arithmetic, dot and cross products."""

__version__ = "0.1.0"
__all__ = ["base", "naming", "vector"]