from .ownership import OwnershipPort
from .record_filter import RecordFilter
from .report import ReportWriterPort

__all__ = ["OwnershipPort", "RecordFilter", "ReportWriterPort"]
