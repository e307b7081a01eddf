"""G2G Lister - account listing generator for G2G marketplace."""

from g2glister.version import __version__

__all__ = ["__version__"]
