"""Report text extraction: field rules applied to pt-BR campaign reports."""

from .extractor import ReportExtractor, parse_report
from .normalizer import (
    fold_accents,
    normalize_br_decimal,
    normalize_br_integer,
    normalize_br_number,
)
from .primitives import ReportDocument
from .rules import DEFAULT_REGISTRY_PATH, FieldRule, load_field_rules

__all__ = [
    "DEFAULT_REGISTRY_PATH",
    "FieldRule",
    "ReportDocument",
    "ReportExtractor",
    "fold_accents",
    "load_field_rules",
    "normalize_br_decimal",
    "normalize_br_integer",
    "normalize_br_number",
    "parse_report",
]
