from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Tag(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category: str = Field(validation_alias=AliasChoices("type", "category"))
    name: str


class Hentai(BaseModel):
    """Gallery metadata as scraped, read only."""

    model_config = ConfigDict(frozen=True)

    id: int
    title_pretty: Optional[str] = None
    upload_date: datetime
    scanlator: Optional[str] = None
    tags: List[Tag] = Field(default_factory=list)


class ApiTitle(BaseModel):
    english: Optional[str] = None
    japanese: Optional[str] = None
    pretty: Optional[str] = None


class ApiGallery(BaseModel):
    """Gallery payload as returned by the nhentai API."""

    id: int
    media_id: Optional[str] = None
    title: ApiTitle = Field(default_factory=ApiTitle)
    scanlator: Optional[str] = None
    upload_date: datetime  # unix seconds, parsed as UTC
    tags: List[Tag] = Field(default_factory=list)
    num_pages: Optional[int] = None
    num_favorites: Optional[int] = None

    def to_hentai(self) -> Hentai:
        return Hentai(
            id=self.id,
            title_pretty=self.title.pretty or None,
            upload_date=self.upload_date,
            scanlator=self.scanlator or None,
            tags=self.tags,
        )


class ComicInfo(BaseModel):
    """
    ComicInfo.xml record.

    Field names follow the external schema verbatim; None marks a field the
    serializer should omit.
    See https://anansi-project.github.io/docs/comicinfo/documentation
    """

    model_config = ConfigDict(frozen=True)

    Series: str
    SeriesSort: str
    Title: str
    Year: int
    Month: int
    Day: int
    Writer: Optional[str] = None
    Translator: Optional[str] = None
    Publisher: Optional[str] = None
    Characters: Optional[str] = None
    Genre: Optional[str] = None
    Tags: Optional[str] = None
    Web: str
    AgeRating: str
    LanguageISO: str


class ReportSummary(BaseModel):
    tags: int = 0
    projected_tags: int = 0
    ignored_tags: int = 0
    language_tags: int = 0
    warnings: int = 0
    deterministic: bool = True


class ReportItem(BaseModel):
    tag: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class MappingReport(BaseModel):
    summary: ReportSummary
    fields: Dict[str, List[str]] = Field(default_factory=dict)
    warnings: List[ReportItem] = Field(default_factory=list)


class ComicInfoResponse(BaseModel):
    comicinfo: ComicInfo
    report: MappingReport

class HealthResponse(BaseModel):
    ok: bool = True
