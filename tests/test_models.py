import json

import pytest
from pydantic import ValidationError

from comicinfo.models import ApiGallery, Tag
from comicinfo.normalize import parse_gallery


def api_payload(**overrides):
    payload = {
        "id": 12345,
        "media_id": "987654",
        "title": {"english": "[Alice] Sample Title (Original)", "japanese": None, "pretty": "Sample Title"},
        "scanlator": "",
        "upload_date": 1688472000,  # 2023-07-04 12:00 UTC
        "tags": [
            {"id": 1, "type": "artist", "name": "alice", "url": "/artist/alice/", "count": 10},
            {"id": 2, "type": "language", "name": "english", "url": "/language/english/", "count": 99},
        ],
        "num_pages": 20,
        "num_favorites": 3,
    }
    payload.update(overrides)
    return payload


def test_tag_accepts_type_or_category():
    assert Tag.model_validate({"type": "artist", "name": "alice"}).category == "artist"
    assert Tag(category="group", name="x").category == "group"


def test_api_gallery_to_hentai():
    hentai = ApiGallery.model_validate(api_payload()).to_hentai()

    assert hentai.id == 12345
    assert hentai.title_pretty == "Sample Title"
    assert hentai.scanlator is None
    assert (hentai.upload_date.year, hentai.upload_date.month, hentai.upload_date.day) == (2023, 7, 4)
    assert [t.category for t in hentai.tags] == ["artist", "language"]


def test_api_gallery_keeps_scanlator():
    hentai = ApiGallery.model_validate(api_payload(scanlator="ScanGroup")).to_hentai()
    assert hentai.scanlator == "ScanGroup"


def test_parse_gallery_latin1_bytes():
    raw = json.dumps(api_payload(scanlator="Équipe Montréal"), ensure_ascii=False).encode("latin-1")
    assert parse_gallery(raw).scanlator == "Équipe Montréal"


def test_parse_gallery_rejects_missing_id():
    payload = api_payload()
    del payload["id"]
    with pytest.raises(ValidationError):
        parse_gallery(json.dumps(payload).encode("utf-8"))
