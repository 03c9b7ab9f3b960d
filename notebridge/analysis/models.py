#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Analysis Models - read-only results produced by the note analyzer.

Every record is created fresh by a single analysis call and never shared or
mutated afterwards. Sequence fields are stored as tuples, so lists passed in
are copied on construction.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Tuple


QuestionType = Literal[
    "multiple_choice", "checkbox", "short_answer", "paragraph", "scale", "dropdown"
]
ContentType = Literal["article", "report", "notes", "letter", "general"]
ChartType = Literal["bar", "line", "pie", "table", "none"]
SlideLayout = Literal["title", "title_body", "two_column", "image_text", "blank"]
SlideTheme = Literal["professional", "academic", "creative", "minimal"]
FormType = Literal["quiz", "survey", "feedback", "registration", "general"]


def _freeze(record, *names: str) -> None:
    """Store the named sequence fields of a frozen record as tuples."""
    for name in names:
        object.__setattr__(record, name, tuple(getattr(record, name)))


# =============================================================================
# EXTRACTED FRAGMENTS
# =============================================================================

@dataclass(frozen=True)
class StructuredTable:
    """
    Pipe table found in Markdown.

    `headers` sets the column count. Rows keep the cells they had in the
    source, so a row may be shorter (or longer) than the header.
    """
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...] = ()
    start_line: int = 0

    def __post_init__(self):
        _freeze(self, "headers")
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))


@dataclass(frozen=True)
class StructuredList:
    """Run of bullet or numbered items with the line that introduced it."""
    title: str
    items: Tuple[str, ...] = ()
    is_numbered: bool = False

    def __post_init__(self):
        _freeze(self, "items")


@dataclass(frozen=True)
class NumericDatum:
    """'Label: 123' pair."""
    label: str
    value: float


@dataclass(frozen=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class Section:
    """Heading-delimited span; empty heading = text before the first heading."""
    heading: str
    content: str


@dataclass(frozen=True)
class DetectedQuestion:
    text: str
    type: QuestionType
    options: Tuple[str, ...] = ()
    required: bool = True
    correct_answer: Optional[str] = None
    points: Optional[int] = None

    def __post_init__(self):
        _freeze(self, "options")

    @property
    def key(self) -> str:
        """Deduplication key."""
        return self.text.lower()


@dataclass(frozen=True)
class SlideProposal:
    """Slide outline: title, body lines, optional notes and a layout tag."""
    title: str
    bullet_points: Tuple[str, ...] = ()
    layout: SlideLayout = "title_body"
    speaker_notes: str = ""

    def __post_init__(self):
        _freeze(self, "bullet_points")


# =============================================================================
# PER-TARGET ANALYSES
# =============================================================================

@dataclass(frozen=True)
class DocsAnalysis:
    suggested_title: str
    headings: Tuple[Heading, ...]
    paragraph_count: int
    has_images: bool
    has_links: bool
    has_tables: bool
    estimated_pages: int
    content_type: ContentType
    summary: str

    def __post_init__(self):
        _freeze(self, "headings")


@dataclass(frozen=True)
class SheetsAnalysis:
    tables: Tuple[StructuredTable, ...]
    lists: Tuple[StructuredList, ...]
    numerical_data: Tuple[NumericDatum, ...]
    suggested_chart_type: ChartType
    has_tabulable_content: bool

    def __post_init__(self):
        _freeze(self, "tables", "lists", "numerical_data")


@dataclass(frozen=True)
class SlidesAnalysis:
    suggested_title: str
    slides: Tuple[SlideProposal, ...]
    estimated_duration: str
    duration_minutes: int
    theme: SlideTheme

    def __post_init__(self):
        _freeze(self, "slides")


@dataclass(frozen=True)
class FormsAnalysis:
    form_type: FormType
    suggested_title: str
    description: str
    questions: Tuple[DetectedQuestion, ...]
    has_answer_key: bool
    is_quiz_likely: bool
    is_survey_likely: bool

    def __post_init__(self):
        _freeze(self, "questions")


@dataclass(frozen=True)
class NoteAnalysis:
    """Everything the analyzer knows about one note."""
    title: str
    word_count: int
    line_count: int
    docs: DocsAnalysis
    sheets: SheetsAnalysis
    slides: SlidesAnalysis
    forms: FormsAnalysis
