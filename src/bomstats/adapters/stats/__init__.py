from .filters import AgeFilter, accept_all, years
from .opener import open_stats
from .parser import StatsParser

__all__ = ["AgeFilter", "StatsParser", "accept_all", "open_stats", "years"]
