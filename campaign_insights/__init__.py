"""Campaign report parsing for pt-BR ad platform reports."""

from .extraction import ReportExtractor, parse_report
from .models import CampaignReport, ProcessedReport

__all__ = ["CampaignReport", "ProcessedReport", "ReportExtractor", "parse_report"]
