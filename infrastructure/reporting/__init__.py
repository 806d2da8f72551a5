from .json_report_writer import JSONReportWriter

__all__ = ["JSONReportWriter"]
