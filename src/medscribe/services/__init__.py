from medscribe.services.export_service import DEFAULT_FORMATS, ReportExporter
from medscribe.services.report_search import filter_reports, matches_search

__all__ = ["DEFAULT_FORMATS", "ReportExporter", "filter_reports", "matches_search"]
