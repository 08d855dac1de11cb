"""
Language resolution for status pages.

Picks one of the two supported languages from an explicit override
or from an Accept-Language header (e.g. ``zh-CN,zh;q=0.9,en;q=0.8``).
Never raises: malformed header entries are skipped or defaulted.
"""

import math

from statuspage.domain.pages.entities import Language, LanguagePreference

DEFAULT_LANGUAGE = Language.ZH
DEFAULT_WEIGHT = 1.0

# Checked in this order for every header entry.
_PREFIX_ORDER: tuple[tuple[str, Language], ...] = (
    ("zh", Language.ZH),
    ("en", Language.EN),
)


def _parse_weight(raw: str) -> float:
    try:
        weight = float(raw)
    except ValueError:
        return DEFAULT_WEIGHT
    if not math.isfinite(weight):
        return DEFAULT_WEIGHT
    return weight


def _parse_entry(entry: str) -> LanguagePreference | None:
    """Parse ``tag;q=weight`` into a preference, or None for an empty entry."""
    parts = [part.strip() for part in entry.split(";")]
    tag = parts[0].lower()
    if not tag:
        return None
    weight = DEFAULT_WEIGHT
    for param in parts[1:]:
        name, _, value = param.partition("=")
        if name.strip().lower() == "q":
            weight = _parse_weight(value.strip())
            break
    return LanguagePreference(tag=tag, weight=weight)


def parse_accept_language(header: str | None) -> list[LanguagePreference]:
    """Parse an Accept-Language header into preferences, highest weight first.

    The sort is stable, so entries of equal weight keep their header order.

    Args:
        header: Raw header value. None or empty yields an empty list.

    Returns:
        Parsed preferences sorted by descending weight.
    """
    if not header:
        return []
    preferences = []
    for entry in header.split(","):
        preference = _parse_entry(entry)
        if preference is not None:
            preferences.append(preference)
    return sorted(preferences, key=lambda p: p.weight, reverse=True)


def resolve_language(explicit: str | None, header: str | None) -> Language:
    """Resolve the page language.

    An explicit ``en`` or ``zh`` wins outright. Otherwise the first
    header entry (by weight) starting with ``zh`` or ``en`` decides;
    entries matching neither are skipped. Falls back to Chinese.

    Args:
        explicit: Value of the ``lang`` query parameter, if any.
        header: Value of the Accept-Language header, if any.

    Returns:
        The resolved language.
    """
    if explicit in (Language.EN.value, Language.ZH.value):
        return Language(explicit)

    for preference in parse_accept_language(header):
        for prefix, language in _PREFIX_ORDER:
            if preference.tag.startswith(prefix):
                return language

    return DEFAULT_LANGUAGE
