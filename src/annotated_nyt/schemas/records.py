"""Schema for already-parsed NYT corpus records."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, field_validator


class RawRecord(BaseModel):
    """One article as produced by the upstream corpus document parser.

    Every field except ``guid`` may be missing. Empty strings and ``None`` are
    both treated as absent by :class:`~annotated_nyt.document_view.DocumentView`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    guid: int = Field(..., description="Corpus-wide document identifier.")

    # Free text
    alternate_url: Optional[AnyUrl] = Field(default=None, description="Alternate URL of the article.")
    article_abstract: Optional[str] = None
    author_biography: Optional[str] = None
    banner: Optional[str] = None
    body: Optional[str] = Field(default=None, description="Full text, one paragraph per line.")
    byline: Optional[str] = None
    column_name: Optional[str] = None
    correction_text: Optional[str] = None
    credit: Optional[str] = None
    dateline: Optional[str] = None
    day_of_week: Optional[str] = None
    feature_page: Optional[str] = None
    headline: Optional[str] = None
    kicker: Optional[str] = None
    lead_paragraph: Optional[str] = Field(default=None, description="Lead paragraph, one paragraph per line.")
    news_desk: Optional[str] = None
    normalized_byline: Optional[str] = None
    online_headline: Optional[str] = None
    online_lead_paragraph: Optional[str] = None
    online_section: Optional[str] = Field(
        default=None, description="Semicolon-separated list of online section names."
    )
    section: Optional[str] = None
    series_name: Optional[str] = None
    slug: Optional[str] = None

    # Numbers and dates
    column_number: Optional[int] = None
    page: Optional[int] = None
    publication_day_of_month: Optional[int] = None
    publication_month: Optional[int] = None
    publication_year: Optional[int] = None
    word_count: Optional[int] = None
    correction_date: Optional[date] = None
    publication_date: Optional[date] = None

    url: Optional[AnyUrl] = None
    source_file: Optional[Path] = Field(default=None, description="File the record was parsed from.")

    # Tag lists
    biographical_categories: Optional[list[str]] = None
    descriptors: Optional[list[str]] = None
    general_online_descriptors: Optional[list[str]] = None
    locations: Optional[list[str]] = None
    names: Optional[list[str]] = None
    online_descriptors: Optional[list[str]] = None
    online_locations: Optional[list[str]] = None
    online_organizations: Optional[list[str]] = None
    online_people: Optional[list[str]] = None
    online_titles: Optional[list[str]] = None
    organizations: Optional[list[str]] = None
    people: Optional[list[str]] = None
    taxonomic_classifiers: Optional[list[str]] = None
    titles: Optional[list[str]] = None
    types_of_material: Optional[list[str]] = None

    @field_validator("source_file", mode="before")
    @classmethod
    def empty_source_file_is_absent(cls, value: object) -> object:
        # Path("") would otherwise become Path(".").
        if value == "":
            return None
        return value
