"""Report service - fetches webhook reports, parses them and overlays upstream fields."""

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..exceptions import (
    UpstreamConnectionError,
    UpstreamHTTPError,
    UpstreamPayloadError,
)
from ..extraction import ReportExtractor
from ..models import CampaignReport, ProcessedReport, UpstreamReportItem
from .store import ReportStore

logger = logging.getLogger(__name__)

CACHE_KEY = "campaign_insights:reports"
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".svg")


def has_valid_link(link: str | None) -> bool:
    """Link counts only if non-blank and looks like an http(s) URL."""
    return bool(link and link.strip() and "http" in link)


def is_image_link(link: str | None) -> bool:
    if not has_valid_link(link):
        return False
    lowered = link.lower()
    return any(ext in lowered for ext in IMAGE_EXTENSIONS)


def overlay_upstream(parsed: CampaignReport, item: UpstreamReportItem) -> ProcessedReport:
    """Build a ProcessedReport where upstream fields take precedence.

    An empty string from upstream counts as absent and falls back to the
    next source (parsed text, or None).
    """
    link = item.ad_link if has_valid_link(item.ad_link) else None

    data = parsed.model_dump()
    data.update(
        id=item.id,
        campaign_name=item.ad_name or parsed.campaign_name,
        created_at=item.created_at or parsed.created_at,
        updated_at=item.updated_at or None,
        video_url=link,
        ad_link=link,
        is_image=is_image_link(item.ad_link),
    )
    data["settings"]["status"] = item.status_real or item.status or parsed.settings.status
    return ProcessedReport.model_validate(data)


class ReportService:
    """Service for turning webhook report items into processed reports.

    Orchestrates:
    1. POSTing to the report webhook (list or regenerate)
    2. Validating each raw item
    3. Parsing the report text
    4. Overlaying authoritative upstream fields
    5. Caching the result in an injected store

    Usage:
        service = ReportService(webhook_url="https://.../webhook/reports")
        reports = service.fetch_reports()
        report = service.get_report_by_id(reports, "42")
    """

    def __init__(
        self,
        webhook_url: str,
        *,
        generate_url: str | None = None,
        client: httpx.Client | None = None,
        extractor: ReportExtractor | None = None,
        store: ReportStore | None = None,
        timeout: float = 30.0,
    ):
        """Initialize service.

        Args:
            webhook_url: Endpoint returning the stored reports
            generate_url: Endpoint that regenerates reports before returning them
            client: httpx client to reuse; one is created (and owned) if omitted
            extractor: Report extractor; defaults to the bundled field registry
            store: Optional cache for processed reports
            timeout: Request timeout in seconds for the owned client
        """
        self.webhook_url = webhook_url
        self.generate_url = generate_url
        self.extractor = extractor or ReportExtractor()
        self.store = store
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ReportService":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def fetch_reports(self) -> list[ProcessedReport]:
        """Fetch, parse and cache the current reports.

        Raises:
            UpstreamHTTPError: Webhook returned a non-2xx status
            UpstreamConnectionError: Webhook unreachable
            UpstreamPayloadError: Body is not JSON or not a list/object
        """
        reports = self.process_items(self._post(self.webhook_url))
        self._cache(reports)
        return reports

    def generate_reports(self) -> list[ProcessedReport]:
        """Ask the webhook to regenerate reports, then process them."""
        if not self.generate_url:
            raise ValueError("generate_url must be set to generate reports")
        reports = self.process_items(self._post(self.generate_url))
        self._cache(reports)
        return reports

    def process_items(self, payload: Any) -> list[ProcessedReport]:
        """Parse raw webhook items; invalid items are skipped and logged."""
        items = payload if isinstance(payload, list) else [payload]
        reports: list[ProcessedReport] = []

        for i, raw in enumerate(items):
            try:
                item = UpstreamReportItem.model_validate(raw)
            except ValidationError as e:
                logger.warning("Skipping report item %d: %s", i, e.errors())
                continue

            # The webhook double-escapes newlines inside the report text
            text = item.report_text.replace("\\n", "\n")
            reports.append(overlay_upstream(self.extractor.parse(text), item))

        logger.info("Processed %d of %d report item(s)", len(reports), len(items))
        return reports

    @staticmethod
    def get_report_by_id(
        reports: list[ProcessedReport], report_id: str
    ) -> ProcessedReport | None:
        return next((r for r in reports if r.id == report_id), None)

    def cached_reports(self) -> list[ProcessedReport]:
        """Reports from the last successful fetch, or [] if none are cached."""
        if self.store is None:
            return []
        raw = self.store.get(CACHE_KEY)
        if raw is None:
            return []
        try:
            return [ProcessedReport.model_validate(d) for d in json.loads(raw)]
        except (ValueError, TypeError) as e:
            logger.warning("Discarding unreadable report cache: %s", e)
            self.store.delete(CACHE_KEY)
            return []

    def _cache(self, reports: list[ProcessedReport]) -> None:
        if self.store is None:
            return
        payload = [r.model_dump(mode="json", by_alias=True) for r in reports]
        self.store.set(CACHE_KEY, json.dumps(payload, ensure_ascii=False))

    def _post(self, url: str) -> Any:
        try:
            response = self._client.post(url, json={})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Report webhook returned %d: %s", e.response.status_code, url)
            raise UpstreamHTTPError(e.response.status_code, url) from e
        except httpx.HTTPError as e:
            logger.error("Error fetching reports from %s: %s", url, e)
            raise UpstreamConnectionError(f"Failed to reach {url}: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamPayloadError(f"Webhook {url} did not return JSON") from e

        if not isinstance(payload, (list, dict)):
            raise UpstreamPayloadError(
                f"Expected a list or object from {url}, got {type(payload).__name__}"
            )
        return payload
