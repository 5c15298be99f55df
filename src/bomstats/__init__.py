"""bomstats: per-BoM directory statistics for wrstat stats.gz dumps."""

__version__ = "0.1.0"
