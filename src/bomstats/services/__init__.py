from .dirstats_service import (
    DirectoryStatsService,
    ancestor_directories,
    sort_stats,
)
from .report_service import ReportService


__all__ = [
    'DirectoryStatsService',
    'ReportService',
    'ancestor_directories',
    'sort_stats',
]
