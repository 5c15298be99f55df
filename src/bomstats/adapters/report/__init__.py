from .tsv_writer import TsvReportWriter, format_size

__all__ = ["TsvReportWriter", "format_size"]
