"""SIN JAPAN Manager gateway."""

__version__ = "0.1.0"
