"""Ring-distributed dense matrix-vector multiplication benchmark."""

__version__ = "0.1.0"
__all__ = ["cli", "partition", "ring", "timing"]