"""Export services."""

from .exporter import ResultExporter
from .pdf_report import PDFReportGenerator, report_filename

__all__ = [
    "ResultExporter",
    "PDFReportGenerator",
    "report_filename",
]
