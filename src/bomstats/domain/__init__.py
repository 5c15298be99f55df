from .errors import (
    BadPathEncodingError,
    BomStatsError,
    InvalidOwnershipTableError,
    LineTooLongError,
    MalformedRecordError,
    PathTooLongError,
    TooFewColumnsError,
    UnknownOwnershipGroupError,
)
from .models import FILE_KIND, ROOT_DIRECTORY, Record, Stats

__all__ = [
    "BadPathEncodingError",
    "BomStatsError",
    "FILE_KIND",
    "InvalidOwnershipTableError",
    "LineTooLongError",
    "MalformedRecordError",
    "PathTooLongError",
    "ROOT_DIRECTORY",
    "Record",
    "Stats",
    "TooFewColumnsError",
    "UnknownOwnershipGroupError",
]
