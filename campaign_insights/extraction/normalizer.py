"""pt-BR number normalization and accent folding.

Every locale assumption about the report text lives here: thousands are
grouped with "." and the decimal separator is ",".
"""

import unicodedata


def normalize_br_number(raw: str) -> float:
    """Convert a pt-BR formatted number to float.

    "1.234,56" -> 1234.56, "5,04" -> 5.04, "12.500" -> 12500.0

    Raises:
        ValueError: If the string is not a number once separators are swapped
    """
    cleaned = raw.strip().replace(".", "").replace(",", ".")
    return float(cleaned)


def normalize_br_integer(raw: str) -> int:
    """Convert a pt-BR grouped count ("3.200") to int.

    Parsed as an integer directly so large counts keep every digit.
    Decimal parts are truncated, matching how the report prints counts.
    """
    return int(raw.strip().replace(".", "").split(",")[0])


def normalize_br_decimal(raw: str) -> float:
    """Convert a percentage written with either decimal separator.

    Percentages are never grouped, so "10,81" and "10.81" both give 10.81.
    """
    return float(raw.strip().replace(",", "."))


def fold_char(char: str) -> str:
    """Strip diacritics from a single character, keeping length 1.

    Characters that decompose into anything other than one base character
    (ligatures, emoji sequences) are returned unchanged.
    """
    decomposed = unicodedata.normalize("NFKD", char)
    base = [c for c in decomposed if not unicodedata.combining(c)]
    if len(base) == 1:
        return base[0]
    return char


def fold_accents(text: str) -> str:
    """Remove accents while preserving character offsets.

    The result has exactly len(text) characters, so match spans found in
    the folded text can be sliced out of the original.
    """
    return "".join(fold_char(c) for c in text)
