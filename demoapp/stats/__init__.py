"""Stats layer package for process and environment introspection."""

from .collector import NOT_SET, ProcessStatsCollector, stats_read_environment, stats_read_memory
from .interfaces import StatsCollectorPort

__all__ = [
    "NOT_SET",
    "ProcessStatsCollector",
    "StatsCollectorPort",
    "stats_read_environment",
    "stats_read_memory",
]
