"""Building blocks for a recursive Monte Carlo ray tracer: vectors, rays, sampling, PDFs, cameras and materials."""

__version__ = "0.1.0"

__all__ = [
    "background",
    "camera",
    "material",
    "onb",
    "pdf",
    "ray",
    "sampling",
    "util",
    "vector",
]