"""Configure and query Glorious Model O/D mice through hidraw feature reports."""

__version__ = "0.1.0"