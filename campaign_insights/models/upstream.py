"""Models for webhook items and reports overlaid with upstream fields."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .campaign_report import CampaignReport


class UpstreamReportItem(BaseModel):
    """One raw item returned by the report webhook.

    Field aliases are the webhook's own (Portuguese) keys. Only
    `report_text` feeds the parser; the rest is authoritative metadata
    overlaid on the parsed record.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    report_text: str = Field(default="", alias="relatorio")
    status: str | None = None
    status_real: str | None = None
    created_at: str | None = Field(default=None, alias="data_criacao")
    updated_at: str | None = Field(default=None, alias="data_atualizacao")
    ad_link: str | None = Field(default=None, alias="link_anuncio")
    ad_name: str | None = Field(default=None, alias="nome_anuncio")
    ad_id: str | None = Field(default=None, alias="id_anuncio")
    video_transcript: str | None = Field(default=None, alias="transcricao_video")

    @field_validator("id", "status", "status_real", "ad_id", mode="before")
    @classmethod
    def coerce_to_str(cls, value: Any) -> Any:
        """Ids and statuses arrive as numbers or strings; we keep strings."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("report_text", mode="before")
    @classmethod
    def null_report_text(cls, value: Any) -> Any:
        return "" if value is None else value


class ProcessedReport(CampaignReport):
    """Parsed report after the upstream overlay."""

    id: str
    ad_link: str | None = None
    updated_at: str | None = None
    is_image: bool = False
