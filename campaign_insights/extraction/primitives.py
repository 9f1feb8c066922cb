"""Reusable extraction primitives.

Every primitive takes a ReportDocument and a FieldRule and returns either
the extracted value or the rule's default. None of them raise.
"""

from collections.abc import Callable
from typing import Any

from ..models.campaign_report import Checkpoint, CostPair
from .normalizer import (
    fold_accents,
    normalize_br_decimal,
    normalize_br_integer,
    normalize_br_number,
)
from .rules import FieldRule


class ReportDocument:
    """Report text plus its accent-folded twin, searched by field rules."""

    def __init__(self, text: str):
        self.text = text
        self.folded = fold_accents(text)
        self._matches: dict[str, dict[str, str] | None] = {}

    def search(self, rule: FieldRule) -> dict[str, str] | None:
        """Named groups of the first match, sliced from the original text.

        Falls back to the accent-folded text so "Frequencia" still matches a
        "Frequência" label.
        """
        if rule.name not in self._matches:
            self._matches[rule.name] = self._search(rule)
        return self._matches[rule.name]

    def _search(self, rule: FieldRule) -> dict[str, str] | None:
        match = rule.pattern.search(self.text)
        if match is None:
            match = rule.folded_pattern.search(self.folded)
        if match is None:
            return None
        return {
            name: self.text[match.start(name) : match.end(name)]
            for name, value in match.groupdict().items()
            if value is not None
        }


def extract_number(doc: ReportDocument, rule: FieldRule) -> float:
    groups = doc.search(rule)
    if groups is None or "value" not in groups:
        return float(rule.default or 0.0)
    try:
        return normalize_br_number(groups["value"])
    except (ValueError, OverflowError):
        return float(rule.default or 0.0)


def extract_count(doc: ReportDocument, rule: FieldRule) -> int:
    groups = doc.search(rule)
    if groups is None or "value" not in groups:
        return int(rule.default or 0)
    try:
        return normalize_br_integer(groups["value"])
    except (ValueError, OverflowError):
        return int(rule.default or 0)


def extract_cost_pair(doc: ReportDocument, rule: FieldRule) -> CostPair:
    """Count + per-unit cost, e.g. "Cliques no link: 1 (R$ 5,04 cada)"."""
    groups = doc.search(rule)
    if groups is None:
        return CostPair()
    try:
        return CostPair(
            count=normalize_br_integer(groups["count"]),
            cost=normalize_br_number(groups["cost"]),
        )
    except (KeyError, ValueError, OverflowError):
        return CostPair()


def extract_percentage_pair(doc: ReportDocument, rule: FieldRule) -> Checkpoint:
    """Funnel checkpoint, e.g. "Até 25%: 8 pessoas = (10,81%)"."""
    groups = doc.search(rule)
    if groups is None:
        return Checkpoint()
    try:
        return Checkpoint(
            count=normalize_br_integer(groups["count"]),
            percentage=normalize_br_decimal(groups["percentage"]),
        )
    except (KeyError, ValueError, OverflowError):
        return Checkpoint()


def extract_text(doc: ReportDocument, rule: FieldRule) -> str:
    default = "" if rule.default is None else str(rule.default)
    groups = doc.search(rule)
    if groups is None:
        return default
    value = groups.get("value", "").strip()
    return value or default


def extract_optional_text(doc: ReportDocument, rule: FieldRule) -> str | None:
    groups = doc.search(rule)
    if groups is None:
        return rule.default
    return groups.get("value", "").strip() or rule.default


def extract_list(doc: ReportDocument, rule: FieldRule) -> tuple[str, ...]:
    """Comma-delimited span, each item trimmed; empty items dropped."""
    groups = doc.search(rule)
    if groups is None or "value" not in groups:
        return ()
    return tuple(item.strip() for item in groups["value"].split(",") if item.strip())


EXTRACTORS: dict[str, Callable[[ReportDocument, FieldRule], Any]] = {
    "number": extract_number,
    "count": extract_count,
    "cost_pair": extract_cost_pair,
    "percentage_pair": extract_percentage_pair,
    "text": extract_text,
    "optional_text": extract_optional_text,
    "list": extract_list,
}
