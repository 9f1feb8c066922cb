from .campaign_report import (
    NOT_AVAILABLE,
    UNKNOWN_CAMPAIGN,
    CampaignReport,
    Checkpoint,
    Clicks,
    CostPair,
    Investment,
    Results,
    Settings,
    VideoPerformance,
)
from .upstream import ProcessedReport, UpstreamReportItem

__all__ = [
    "NOT_AVAILABLE",
    "UNKNOWN_CAMPAIGN",
    "CampaignReport",
    "Checkpoint",
    "Clicks",
    "CostPair",
    "Investment",
    "ProcessedReport",
    "Results",
    "Settings",
    "UpstreamReportItem",
    "VideoPerformance",
]
