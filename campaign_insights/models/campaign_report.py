"""Pydantic models for the parsed campaign report record."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UNKNOWN_CAMPAIGN = "Campanha Desconhecida"
NOT_AVAILABLE = "N/A"


class ReportSection(BaseModel):
    """Frozen base for every record section.

    Fields are snake_case in Python and camelCase when dumped with
    by_alias=True, which is the shape JSON consumers expect.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class CostPair(ReportSection):
    """Occurrence count and per-occurrence cost (R$)."""

    count: int = Field(default=0, ge=0)
    cost: float = Field(default=0.0, ge=0)


class Checkpoint(ReportSection):
    """Video funnel checkpoint: viewers remaining and share of total (0-100)."""

    count: int = Field(default=0, ge=0)
    percentage: float = Field(default=0.0, ge=0, le=100)


class Investment(ReportSection):
    total_spent: float = 0.0
    reach: float = 0.0
    impressions: float = 0.0
    frequency: float = 0.0
    cpm: float = 0.0


class Clicks(ReportSection):
    # ctr and cpc are the values stated in the report, never recomputed
    total_clicks: float = 0.0
    unique_clicks: float = 0.0
    ctr: float = 0.0
    cpc: float = 0.0


class Results(ReportSection):
    video_views: CostPair = CostPair()
    link_clicks: CostPair = CostPair()
    reactions: int = 0
    shares: int = 0
    net_likes: int = 0
    conversations: CostPair = CostPair()
    total_engagements: CostPair = CostPair()


class Settings(ReportSection):
    status: str = NOT_AVAILABLE
    cta_type: str = NOT_AVAILABLE
    age_range: str = NOT_AVAILABLE
    interests: tuple[str, ...] = ()
    job_titles: tuple[str, ...] = ()


class VideoPerformance(ReportSection):
    """Retention funnel; all zero for image ads."""

    total_views: float = 0.0
    at_25: Checkpoint = Field(default=Checkpoint(), alias="at25")
    at_50: Checkpoint = Field(default=Checkpoint(), alias="at50")
    at_75: Checkpoint = Field(default=Checkpoint(), alias="at75")
    at_end: Checkpoint = Field(default=Checkpoint(), alias="atEnd")


class CampaignReport(ReportSection):
    """Structured campaign performance extracted from one report document.

    Always fully populated: any field the document does not mention keeps
    its default. Instances are immutable; overlays build a new record.
    """

    campaign_name: str = UNKNOWN_CAMPAIGN
    created_at: str | None = None
    video_url: str | None = None
    investment: Investment = Investment()
    clicks: Clicks = Clicks()
    results: Results = Results()
    settings: Settings = Settings()
    content: str = ""
    video_performance: VideoPerformance = VideoPerformance()
