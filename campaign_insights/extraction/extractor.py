"""Campaign report text extractor."""

import logging
from pathlib import Path
from typing import Any

from ..models.campaign_report import CampaignReport
from .primitives import EXTRACTORS, ReportDocument
from .rules import FieldRule, load_field_rules

logger = logging.getLogger(__name__)


class ReportExtractor:
    """Turns one report document into a CampaignReport.

    Each field rule from the registry is applied independently to the whole
    document, so a missing or reordered section never affects the others.
    Parsing never raises: unmatched fields keep their defaults.

    Usage:
        extractor = ReportExtractor()
        report = extractor.parse(text)
    """

    def __init__(
        self,
        registry_path: Path | None = None,
        rules: tuple[FieldRule, ...] | None = None,
    ):
        """Compile field rules once per extractor.

        Args:
            registry_path: Path to a field registry YAML. Defaults to bundled config.
            rules: Pre-built rules; takes precedence over registry_path.

        Raises:
            FieldRegistryError: If the registry cannot be loaded
        """
        self.rules = rules if rules is not None else load_field_rules(registry_path)

    def parse(self, document: str) -> CampaignReport:
        """Extract every known field from a report document."""
        if not isinstance(document, str):
            document = ""

        doc = ReportDocument(document)
        values: dict[str, Any] = {}
        missed: list[str] = []

        for rule in self.rules:
            if doc.search(rule) is None:
                missed.append(rule.name)
            _assign(values, rule.path, EXTRACTORS[rule.shape](doc, rule))

        if missed:
            logger.debug("No match for %d field(s), using defaults: %s", len(missed), missed)

        return CampaignReport.model_validate(values)


def _assign(target: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    """Set a dotted-path value in a nested dict."""
    for key in path[:-1]:
        target = target.setdefault(key, {})
    target[path[-1]] = value


_default_extractor: ReportExtractor | None = None


def parse_report(document: str) -> CampaignReport:
    """Parse with a lazily built extractor using the bundled registry."""
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = ReportExtractor()
    return _default_extractor.parse(document)
