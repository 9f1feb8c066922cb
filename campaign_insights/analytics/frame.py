"""Flatten parsed reports into a Polars DataFrame."""

from collections.abc import Iterable
from typing import Any

import polars as pl

from ..models import CampaignReport

# Counts are unbounded ints on the record; Int64 columns saturate here
INT64_MAX = 2**63 - 1

FRAME_SCHEMA: dict[str, pl.DataType] = {
    "id": pl.Utf8,
    "campaign_name": pl.Utf8,
    "created_at": pl.Utf8,
    "video_url": pl.Utf8,
    # Investment
    "investment_total_spent": pl.Float64,
    "investment_reach": pl.Float64,
    "investment_impressions": pl.Float64,
    "investment_frequency": pl.Float64,
    "investment_cpm": pl.Float64,
    # Clicks
    "clicks_total_clicks": pl.Float64,
    "clicks_unique_clicks": pl.Float64,
    "clicks_ctr": pl.Float64,
    "clicks_cpc": pl.Float64,
    # Results
    "results_video_views_count": pl.Int64,
    "results_video_views_cost": pl.Float64,
    "results_link_clicks_count": pl.Int64,
    "results_link_clicks_cost": pl.Float64,
    "results_reactions": pl.Int64,
    "results_shares": pl.Int64,
    "results_net_likes": pl.Int64,
    "results_conversations_count": pl.Int64,
    "results_conversations_cost": pl.Float64,
    "results_total_engagements_count": pl.Int64,
    "results_total_engagements_cost": pl.Float64,
    # Settings
    "settings_status": pl.Utf8,
    "settings_cta_type": pl.Utf8,
    "settings_age_range": pl.Utf8,
    "settings_interests": pl.Utf8,
    "settings_job_titles": pl.Utf8,
    # Video funnel
    "video_total_views": pl.Float64,
    "video_at_25_count": pl.Int64,
    "video_at_25_pct": pl.Float64,
    "video_at_50_count": pl.Int64,
    "video_at_50_pct": pl.Float64,
    "video_at_75_count": pl.Int64,
    "video_at_75_pct": pl.Float64,
    "video_at_end_count": pl.Int64,
    "video_at_end_pct": pl.Float64,
}


def _clamp_count(value: int) -> int:
    return min(value, INT64_MAX)


def flatten_report(report: CampaignReport) -> dict[str, Any]:
    """One flat row per report; list fields joined with ", ".

    Counts above the Int64 range are clamped to INT64_MAX.
    """
    inv, clk, res = report.investment, report.clicks, report.results
    st, vid = report.settings, report.video_performance
    row: dict[str, Any] = {
        "id": getattr(report, "id", None),
        "campaign_name": report.campaign_name,
        "created_at": report.created_at,
        "video_url": report.video_url,
        "investment_total_spent": inv.total_spent,
        "investment_reach": inv.reach,
        "investment_impressions": inv.impressions,
        "investment_frequency": inv.frequency,
        "investment_cpm": inv.cpm,
        "clicks_total_clicks": clk.total_clicks,
        "clicks_unique_clicks": clk.unique_clicks,
        "clicks_ctr": clk.ctr,
        "clicks_cpc": clk.cpc,
        "results_reactions": _clamp_count(res.reactions),
        "results_shares": _clamp_count(res.shares),
        "results_net_likes": _clamp_count(res.net_likes),
        "settings_status": st.status,
        "settings_cta_type": st.cta_type,
        "settings_age_range": st.age_range,
        "settings_interests": ", ".join(st.interests),
        "settings_job_titles": ", ".join(st.job_titles),
        "video_total_views": vid.total_views,
    }
    for name in ("video_views", "link_clicks", "conversations", "total_engagements"):
        pair = getattr(res, name)
        row[f"results_{name}_count"] = _clamp_count(pair.count)
        row[f"results_{name}_cost"] = pair.cost
    for name in ("at_25", "at_50", "at_75", "at_end"):
        checkpoint = getattr(vid, name)
        row[f"video_{name}_count"] = _clamp_count(checkpoint.count)
        row[f"video_{name}_pct"] = checkpoint.percentage
    return row


def reports_to_frame(reports: Iterable[CampaignReport]) -> pl.DataFrame:
    """Build a DataFrame with one row per report and a fixed schema."""
    rows = [flatten_report(r) for r in reports]
    if not rows:
        return pl.DataFrame(schema=FRAME_SCHEMA)
    return pl.from_dicts(rows, schema=FRAME_SCHEMA)


def add_derived_metrics(df: pl.DataFrame) -> pl.DataFrame:
    """Add completion_rate and cost_per_engagement columns.

    completion_rate = at_end pct as a decimal (10% -> 0.10)
    cost_per_engagement = spend / engagements, null when there are none
    """
    engagements = pl.col("results_total_engagements_count")
    return df.with_columns(
        (pl.col("video_at_end_pct") / 100).alias("completion_rate"),
        pl.when(engagements > 0)
        .then(pl.col("investment_total_spent") / engagements)
        .otherwise(None)
        .alias("cost_per_engagement"),
    )
