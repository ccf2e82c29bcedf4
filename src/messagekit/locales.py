import re
from typing import Any, Literal, TypeGuard, get_args

from messagekit.schemas import LanguageRange

__all__ = [
    "Locale",
    "SUPPORTED_LOCALES",
    "DEFAULT_LOCALE",
    "is_locale",
    "normalize_locale",
    "parse_accept_language",
    "best_locale_from_accept_language",
]

Locale = Literal["en", "de", "fr", "it", "es"]

SUPPORTED_LOCALES: tuple[Locale, ...] = get_args(Locale)
DEFAULT_LOCALE: Locale = "en"

QUALITY_PATTERN = re.compile(r"^q=(\d*(?:\.\d+)?)$", re.IGNORECASE)


def is_locale(value: Any) -> TypeGuard[Locale]:
    return isinstance(value, str) and value in SUPPORTED_LOCALES


def normalize_locale(value: Any) -> Locale | None:
    """Normalize a locale-like string to one of the supported locales.

    Examples:
        "EN" -> "en"
        "de-DE" -> "de"
        "fr_CA" -> "fr"
    """
    if not isinstance(value, str) or not (value := value.strip()):
        return None
    primary = value.replace("_", "-").lower().split("-")[0]
    return primary if is_locale(primary) else None


def parse_accept_language(header: str) -> list[LanguageRange]:
    """Parse an Accept-Language header, best ranges first.

    Ranges with equal quality keep the order they had in the header.
    Wildcards and empty tags are dropped.
    """
    ranges: list[LanguageRange] = []
    for idx, part in enumerate(header.split(",")):
        tag, *params = [item.strip() for item in part.strip().split(";")]
        if not tag or tag == "*":
            continue
        q = 1.0
        for param in params:
            match = QUALITY_PATTERN.match(param)
            if match and match.group(1):
                q = float(match.group(1))
        ranges.append(LanguageRange(tag=tag, q=q, idx=idx))
    return sorted(ranges, key=lambda r: (-r.q, r.idx))


def best_locale_from_accept_language(
    header: str | None, default: Locale = DEFAULT_LOCALE
) -> Locale:
    """Pick the best supported locale for an Accept-Language header.

    Args:
        header (str | None): Raw header value.
        default (Locale): Returned when nothing in the header is supported.

    Returns:
        Locale: The negotiated locale.
    """
    if not isinstance(header, str) or not header.strip():
        return default
    for language_range in parse_accept_language(header):
        if locale := normalize_locale(language_range.tag):
            return locale
    return default
