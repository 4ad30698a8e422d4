"""A top-down arcade shooter whose difficulty follows a PM2.5 reading."""

__version__ = "0.1.0"
__all__ = ["__version__"]