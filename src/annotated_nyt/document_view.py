"""Null-safe view over a parsed NYT corpus record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Optional

from pydantic import AnyUrl

from .schemas.records import RawRecord
from .text_utils import clean_text, null_list_as_empty, present, split_lines, split_sections

DIAGNOSTIC_LIST_LIMIT = 3

# Accessor order used by ``repr`` and ``to_row``.
_FIELD_NAMES: tuple[str, ...] = (
    "guid",
    "online_section_as_list",
    "lead_paragraph_as_list",
    "online_lead_paragraph_as_list",
    "body_as_list",
    "headline",
    "online_headline",
    "byline",
    "dateline",
    "article_abstract",
    "lead_paragraph",
    "online_lead_paragraph",
    "body",
    "correction_text",
    "kicker",
    "alternate_url",
    "descriptors",
    "author_biography",
    "banner",
    "biographical_categories",
    "column_name",
    "column_number",
    "correction_date",
    "credit",
    "day_of_week",
    "feature_page",
    "general_online_descriptors",
    "locations",
    "names",
    "news_desk",
    "normalized_byline",
    "online_descriptors",
    "online_locations",
    "online_organizations",
    "online_people",
    "online_section",
    "online_titles",
    "organizations",
    "page",
    "people",
    "publication_date",
    "publication_day_of_month",
    "publication_month",
    "publication_year",
    "section",
    "series_name",
    "slug",
    "source_path",
    "taxonomic_classifiers",
    "titles",
    "types_of_material",
    "url",
    "word_count",
)


@dataclass(frozen=True, repr=False)
class DocumentView:
    """Read-only accessors over a :class:`RawRecord`.

    Scalar accessors return ``None`` when the raw field is missing or empty.
    List accessors always return a fresh list, empty when the raw field is
    missing. Nothing is cached; each access re-reads the wrapped record.
    """

    record: RawRecord

    def __hash__(self) -> int:
        # The wrapped model holds lists and cannot be hashed itself.
        return hash(self.record.guid)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return _FIELD_NAMES

    @property
    def guid(self) -> int:
        return self.record.guid

    # Derived lists

    @property
    def online_section_as_list(self) -> list[str]:
        """Online section names, split on ``;`` and trimmed."""
        return split_sections(self.record.online_section)

    @property
    def lead_paragraph_as_list(self) -> list[str]:
        return split_lines(self.record.lead_paragraph)

    @property
    def online_lead_paragraph_as_list(self) -> list[str]:
        return split_lines(self.record.online_lead_paragraph)

    @property
    def body_as_list(self) -> list[str]:
        """Body paragraphs, one per line of the raw body."""
        return split_lines(self.record.body)

    # Text

    @property
    def headline(self) -> Optional[str]:
        return present(self.record.headline)

    @property
    def online_headline(self) -> Optional[str]:
        return present(self.record.online_headline)

    @property
    def byline(self) -> Optional[str]:
        return present(self.record.byline)

    @property
    def dateline(self) -> Optional[str]:
        return present(self.record.dateline)

    @property
    def article_abstract(self) -> Optional[str]:
        return present(self.record.article_abstract)

    @property
    def lead_paragraph(self) -> Optional[str]:
        return present(self.record.lead_paragraph)

    @property
    def online_lead_paragraph(self) -> Optional[str]:
        """Online lead paragraph with exotic whitespace replaced and trimmed."""
        return clean_text(self.record.online_lead_paragraph)

    @property
    def body(self) -> Optional[str]:
        return present(self.record.body)

    @property
    def correction_text(self) -> Optional[str]:
        return present(self.record.correction_text)

    @property
    def kicker(self) -> Optional[str]:
        return present(self.record.kicker)

    @property
    def author_biography(self) -> Optional[str]:
        return present(self.record.author_biography)

    @property
    def banner(self) -> Optional[str]:
        return present(self.record.banner)

    @property
    def column_name(self) -> Optional[str]:
        return present(self.record.column_name)

    @property
    def credit(self) -> Optional[str]:
        return present(self.record.credit)

    @property
    def day_of_week(self) -> Optional[str]:
        return present(self.record.day_of_week)

    @property
    def feature_page(self) -> Optional[str]:
        return present(self.record.feature_page)

    @property
    def news_desk(self) -> Optional[str]:
        return present(self.record.news_desk)

    @property
    def normalized_byline(self) -> Optional[str]:
        return present(self.record.normalized_byline)

    @property
    def online_section(self) -> Optional[str]:
        return present(self.record.online_section)

    @property
    def section(self) -> Optional[str]:
        return present(self.record.section)

    @property
    def series_name(self) -> Optional[str]:
        return present(self.record.series_name)

    @property
    def slug(self) -> Optional[str]:
        return present(self.record.slug)

    # Numbers, dates and links

    @property
    def column_number(self) -> Optional[int]:
        return self.record.column_number

    @property
    def page(self) -> Optional[int]:
        return self.record.page

    @property
    def publication_day_of_month(self) -> Optional[int]:
        return self.record.publication_day_of_month

    @property
    def publication_month(self) -> Optional[int]:
        return self.record.publication_month

    @property
    def publication_year(self) -> Optional[int]:
        return self.record.publication_year

    @property
    def word_count(self) -> Optional[int]:
        return self.record.word_count

    @property
    def correction_date(self) -> Optional[date]:
        return self.record.correction_date

    @property
    def publication_date(self) -> Optional[date]:
        return self.record.publication_date

    @property
    def alternate_url(self) -> Optional[AnyUrl]:
        return self.record.alternate_url

    @property
    def url(self) -> Optional[AnyUrl]:
        return self.record.url

    @property
    def source_path(self) -> Optional[Path]:
        return self.record.source_file

    # Tag lists

    @property
    def descriptors(self) -> list[str]:
        return null_list_as_empty(self.record.descriptors)

    @property
    def biographical_categories(self) -> list[str]:
        return null_list_as_empty(self.record.biographical_categories)

    @property
    def general_online_descriptors(self) -> list[str]:
        return null_list_as_empty(self.record.general_online_descriptors)

    @property
    def locations(self) -> list[str]:
        return null_list_as_empty(self.record.locations)

    @property
    def names(self) -> list[str]:
        return null_list_as_empty(self.record.names)

    @property
    def online_descriptors(self) -> list[str]:
        return null_list_as_empty(self.record.online_descriptors)

    @property
    def online_locations(self) -> list[str]:
        return null_list_as_empty(self.record.online_locations)

    @property
    def online_organizations(self) -> list[str]:
        return null_list_as_empty(self.record.online_organizations)

    @property
    def online_people(self) -> list[str]:
        return null_list_as_empty(self.record.online_people)

    @property
    def online_titles(self) -> list[str]:
        return null_list_as_empty(self.record.online_titles)

    @property
    def organizations(self) -> list[str]:
        return null_list_as_empty(self.record.organizations)

    @property
    def people(self) -> list[str]:
        return null_list_as_empty(self.record.people)

    @property
    def taxonomic_classifiers(self) -> list[str]:
        return null_list_as_empty(self.record.taxonomic_classifiers)

    @property
    def titles(self) -> list[str]:
        return null_list_as_empty(self.record.titles)

    @property
    def types_of_material(self) -> list[str]:
        return null_list_as_empty(self.record.types_of_material)

    def to_row(self) -> dict[str, Any]:
        """Return every accessor as a JSON-ready mapping with full lists."""
        row: dict[str, Any] = {}
        for name in _FIELD_NAMES:
            value = getattr(self, name)
            if isinstance(value, (AnyUrl, Path)):
                value = str(value)
            row[name] = value
        return row

    def __repr__(self) -> str:
        parts = []
        for name in _FIELD_NAMES:
            value = getattr(self, name)
            if isinstance(value, list):
                value = value[:DIAGNOSTIC_LIST_LIMIT]
            parts.append(f"{name}={value!r}")
        return f"{type(self).__name__}({', '.join(parts)})"
