"""alphatrace - Trace the alpha silhouette of an image into a vector outline.

alphatrace is a CLI tool that reads a raster image, finds the boundary of its
non-transparent region, follows that boundary into closed contours and reduces
the largest one to a handful of corner-preserving points ready to be stroked
or filled.

Example:
    $ alphatrace logo.png

This will create logo-outline.svg containing a single closed path that hugs
the opaque pixels of logo.png.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
