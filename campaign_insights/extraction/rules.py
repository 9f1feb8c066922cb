"""Field rule registry: declarative label patterns for every record field."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..exceptions import FieldRegistryError
from .normalizer import fold_accents

DEFAULT_REGISTRY_PATH = Path(__file__).parent.parent / "config" / "field_registry.yaml"

SHAPES = frozenset(
    {"number", "count", "cost_pair", "percentage_pair", "text", "optional_text", "list"}
)

# Descriptive words allowed between a label and its colon, e.g.
# "Alcance (pessoas únicas): 12.500 pessoas"
QUALIFIER = r"[^:\n]*?"
NO_QUALIFIER = r"[ \t]*"


@dataclass(frozen=True)
class FieldRule:
    """One independently applied extraction rule.

    `pattern` runs against the original document; `folded_pattern` is the
    accent-stripped equivalent, tried against the folded document when the
    original pattern finds nothing.
    """

    name: str
    shape: str
    pattern: re.Pattern[str]
    folded_pattern: re.Pattern[str]
    default: Any = None

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(self.name.split("."))


def label_pattern(label: str) -> str:
    """Regex for a label with case-tolerant word initials.

    "Cliques no link" -> [Cc]liques\\s+[Nn]o\\s+[Ll]ink
    """
    words = []
    for word in label.split():
        head, tail = word[0], word[1:]
        if head.isalpha() and head.lower() != head.upper():
            words.append(f"[{head.upper()}{head.lower()}]{re.escape(tail)}")
        else:
            words.append(re.escape(word))
    return r"\s+".join(words)


def build_pattern(spec: dict[str, Any]) -> str:
    """Assemble the full regex source for one registry entry."""
    if "pattern" in spec:
        return spec["pattern"]

    labels = spec.get("labels") or []
    if not labels or "value" not in spec:
        raise FieldRegistryError("rule needs either 'pattern' or 'labels' + 'value'")

    alternatives = "|".join(label_pattern(label) for label in labels)
    qualifier = QUALIFIER if spec.get("qualifier", True) else NO_QUALIFIER
    return rf"(?<!\w)(?:{alternatives}){qualifier}:[ \t]*{spec['value']}"


def build_rule(name: str, spec: dict[str, Any]) -> FieldRule:
    """Compile a registry entry into a FieldRule."""
    if not isinstance(spec, dict):
        raise FieldRegistryError(f"Rule for field {name!r} must be a mapping")

    shape = spec.get("shape")
    if shape not in SHAPES:
        raise FieldRegistryError(f"Unknown shape {shape!r} for field {name!r}")

    try:
        source = build_pattern(spec)
    except FieldRegistryError as e:
        raise FieldRegistryError(f"Invalid rule {name!r}: {e}") from e

    flags = re.IGNORECASE if spec.get("ignore_case", False) else 0
    try:
        pattern = re.compile(source, flags)
        folded = re.compile(fold_accents(source), flags)
    except re.error as e:
        raise FieldRegistryError(f"Invalid regex for field {name!r}: {e}") from e

    return FieldRule(
        name=name,
        shape=shape,
        pattern=pattern,
        folded_pattern=folded,
        default=spec.get("default"),
    )


def load_field_rules(path: Path | None = None) -> tuple[FieldRule, ...]:
    """Load and compile the field registry YAML.

    Raises:
        FieldRegistryError: If the file is missing, unreadable or malformed
    """
    path = path or DEFAULT_REGISTRY_PATH
    try:
        with open(path, encoding="utf-8") as f:
            registry = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise FieldRegistryError(f"Failed to load field registry from {path}: {e}") from e

    if not isinstance(registry, dict) or not isinstance(registry.get("fields"), dict):
        raise FieldRegistryError(f"Field registry {path} has no 'fields' mapping")

    return tuple(build_rule(name, spec) for name, spec in registry["fields"].items())
