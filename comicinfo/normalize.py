"""
Core mapping logic: nhentai gallery -> ComicInfo.

Responsibilities:
- tag projection into the untyped ComicInfo string fields
- language code resolution
- title, date and link derivation
- mapping report (what was ignored or simplified)
- payload decoding for uploaded gallery files
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Sequence

from charset_normalizer import from_bytes

from .models import ApiGallery, ComicInfo, Hentai, Tag
from .rules import (
    AGE_RATING,
    DAY_RANGE,
    FIELD_TAG_TYPES,
    GALLERY_URL,
    LANGUAGE_CODES,
    LANGUAGE_QUALIFIERS,
    LANGUAGE_TAG_TYPES,
    MONTH_RANGE,
    TAG_SEPARATOR,
    TITLE_FORMAT,
    YEAR_RANGE,
)


class InvariantViolation(AssertionError):
    """Upstream handed over data that cannot exist; aborts the record."""


def filter_and_combine_tags(
    tags: Iterable[Tag], types: Sequence[str], display_type: bool = False
) -> Optional[str]:
    """
    Filter tags by category and combine the rest into a single string.

    Rules:
    - Keep only tags whose category is in `types`, everything else is ignored.
    - Render as "name", or "category: name" if `display_type`.
    - Sort ascending. Equal strings are kept, not deduplicated.
    - Join at "," without whitespace.
    - Return None instead of an empty string.
    """
    combined = sorted(
        f"{tag.category}: {tag.name}" if display_type else tag.name
        for tag in tags
        if tag.category in types
    )
    joined = TAG_SEPARATOR.join(combined)
    return joined or None


def language_iso(tags: Iterable[Tag], types: Sequence[str]) -> str:
    """
    Resolve the language tags to one two-letter code.

    ComicInfo can only hold a single language, so the last recognized
    language tag wins. Returns "" if no tag names a known language.
    """
    code = ""
    for tag in tags:
        if tag.category in types and tag.name in LANGUAGE_CODES:
            code = LANGUAGE_CODES[tag.name]
    return code


def _date_component(value: int, bounds: tuple[int, int], label: str) -> int:
    low, high = bounds
    if not low <= value <= high:
        raise InvariantViolation(
            f'Converting {label} "{value}" failed even though it comes directly from a datetime.'
        )
    return value


def _title(hentai: Hentai) -> str:
    # id in front, Komga cannot search the "Number" field
    return TITLE_FORMAT.format(id=hentai.id, title=hentai.title_pretty or "")


def to_comicinfo(hentai: Hentai) -> ComicInfo:
    title = _title(hentai)
    uploaded = hentai.upload_date
    return ComicInfo(
        Series=title,
        SeriesSort=title,
        Title=title,
        Year=_date_component(uploaded.year, YEAR_RANGE, "year"),
        Month=_date_component(uploaded.month, MONTH_RANGE, "month"),
        Day=_date_component(uploaded.day, DAY_RANGE, "day"),
        Writer=filter_and_combine_tags(hentai.tags, FIELD_TAG_TYPES["Writer"]),
        Translator=hentai.scanlator,
        Publisher=filter_and_combine_tags(hentai.tags, FIELD_TAG_TYPES["Publisher"]),
        Characters=filter_and_combine_tags(hentai.tags, FIELD_TAG_TYPES["Characters"]),
        Genre=filter_and_combine_tags(hentai.tags, FIELD_TAG_TYPES["Genre"]),
        Tags=filter_and_combine_tags(hentai.tags, FIELD_TAG_TYPES["Tags"]),
        Web=GALLERY_URL.format(id=hentai.id),
        AgeRating=AGE_RATING,
        LanguageISO=language_iso(hentai.tags, LANGUAGE_TAG_TYPES),
    )


def build_report(hentai: Hentai) -> Dict[str, Any]:
    """
    Report which tags the projection dropped or simplified.

    Deterministic: warnings follow tag order.
    """
    warnings: list[dict] = []

    projected = {t for types in FIELD_TAG_TYPES.values() for t in types}
    consumed = projected | set(LANGUAGE_TAG_TYPES)

    projected_tags = 0
    ignored_tags = 0
    language_tags = 0
    recognized: list[str] = []

    for tag in hentai.tags:
        if tag.category in projected:
            projected_tags += 1

        if tag.category not in consumed:
            ignored_tags += 1
            warnings.append({
                "tag": f"{tag.category}: {tag.name}",
                "issue": "tag_category_ignored",
                "value": tag.category,
                "action": "ignored",
            })
            continue

        if tag.category in LANGUAGE_TAG_TYPES:
            language_tags += 1
            if tag.name in LANGUAGE_CODES:
                recognized.append(tag.name)
            elif tag.name not in LANGUAGE_QUALIFIERS:
                warnings.append({
                    "tag": f"{tag.category}: {tag.name}",
                    "issue": "language_unrecognized",
                    "value": tag.name,
                    "action": "ignored",
                })

    if len(recognized) > 1:
        warnings.append({
            "tag": None,
            "issue": "multiple_languages",
            "value": TAG_SEPARATOR.join(recognized),
            "action": f"kept_last:{LANGUAGE_CODES[recognized[-1]]}",
        })

    return {
        "summary": {
            "tags": len(hentai.tags),
            "projected_tags": projected_tags,
            "ignored_tags": ignored_tags,
            "language_tags": language_tags,
            "warnings": len(warnings),
            "deterministic": True,
        },
        "fields": {
            **{field: list(types) for field, types in FIELD_TAG_TYPES.items()},
            "LanguageISO": list(LANGUAGE_TAG_TYPES),
        },
        "warnings": warnings,
    }


def map_gallery(hentai: Hentai) -> Dict[str, Any]:
    """
    Returns a dict matching the API's response envelope.
    """
    return {
        "comicinfo": to_comicinfo(hentai).model_dump(),
        "report": build_report(hentai),
    }


def decode_payload(raw: bytes) -> str:
    """
    Decode an uploaded payload to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is stripped.
    - If decode fails, fall back to UTF-8 with replacement characters.
    """
    decode_used = "utf-8"
    match = from_bytes(raw).best()
    if match is not None:
        decode_used = match.encoding

    if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8", "utf_8_sig"):
        decode_used = "utf-8-sig"

    try:
        return raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        return raw.decode("utf-8", errors="replace")


def parse_gallery(raw: bytes) -> Hentai:
    """Raises pydantic.ValidationError on a malformed payload."""
    return ApiGallery.model_validate_json(decode_payload(raw)).to_hentai()
