#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Note Analyzer - derive Docs / Sheets / Slides / Forms proposals from a note.

Combines the extractors, the section splitter and the question detector into
one read-only NoteAnalysis per call. Thresholds come from config.settings;
vocabulary comes from the keyword tables in .patterns.
"""

import math
from typing import List, Optional

from .extractors import extract_lists, extract_numerical_data, extract_tables
from .models import (
    DocsAnalysis,
    FormsAnalysis,
    Heading,
    NoteAnalysis,
    SheetsAnalysis,
    SlideProposal,
    SlidesAnalysis,
)
from .patterns import (
    FRONT_MATTER_PATTERN,
    H1_PATTERN,
    IMAGE_PATTERN,
    KeywordTable,
    LINK_PATTERN,
    MARKDOWN_SUFFIX_PATTERN,
    PARAGRAPH_SPLIT_PATTERN,
    TABLE_HINT_PATTERN,
    YAML_TITLE_PATTERN,
    keywords_for_locales,
)
from .questions import detect_answer_key, detect_questions
from .sections import (
    extract_bullet_points,
    extract_headings,
    generate_speaker_notes,
    split_into_sections,
)
from config.constants import (
    ARTICLE_MIN_HEADINGS,
    ARTICLE_MIN_PARAGRAPHS,
    BAR_CHART_MIN_ROWS,
    NOTES_MAX_HEADINGS,
    NOTES_MAX_PARAGRAPHS,
    PIE_CHART_MAX_POINTS,
)
from config.logging_config import get_logger
from config.settings import Settings, get_settings

logger = get_logger(__name__)


# =============================================================================
# TEXT STATISTICS
# =============================================================================

def strip_front_matter(text: str) -> str:
    """Remove a leading '---' ... '---' block."""
    return FRONT_MATTER_PATTERN.sub('', text, count=1)


def count_words(text: str) -> int:
    """Whitespace-separated words outside the front matter."""
    return len(strip_front_matter(text).split())


def count_paragraphs(text: str) -> int:
    """Blank-line-delimited blocks that are not headings, tables or lists."""
    blocks = PARAGRAPH_SPLIT_PATTERN.split(strip_front_matter(text))
    return sum(
        1 for block in blocks
        if block.strip() and not block.strip().startswith(('#', '|', '-'))
    )


def extract_title(text: str, fallback_title: str) -> str:
    """
    Resolve the note title.

    Order: first H1 heading, then a 'title:' line (quotes stripped), then
    the fallback with a trailing .md / .markdown removed.
    """
    match = H1_PATTERN.search(text)
    if match:
        return match.group(1).strip()

    match = YAML_TITLE_PATTERN.search(text)
    if match:
        title = match.group(1).strip()
        if title[:1] in ('"', "'"):
            title = title[1:]
        if title[-1:] in ('"', "'"):
            title = title[:-1]
        return title

    return MARKDOWN_SUFFIX_PATTERN.sub('', fallback_title)


def estimate_pages(word_count: int, words_per_page: int) -> int:
    return max(1, math.ceil(word_count / words_per_page))


# =============================================================================
# ANALYZER
# =============================================================================

class NoteAnalyzer:
    """
    Content analyzer for Markdown notes.

    Usage:
        analyzer = NoteAnalyzer()
        analysis = analyzer.analyze(text, "Meeting.md")
        analysis.slides.slides[0].title
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        keywords: Optional[KeywordTable] = None,
    ):
        """
        Initialize analyzer.

        Args:
            settings: Thresholds; defaults to the cached global settings
            keywords: Vocabulary; defaults to settings.keyword_locales
        """
        self.settings = settings or get_settings()
        self.keywords = keywords or keywords_for_locales(self.settings.keyword_locales)

    def analyze(self, text: str, fallback_title: str) -> NoteAnalysis:
        """
        Analyze a note for all four targets.

        Args:
            text: Markdown content
            fallback_title: Usually the note's file name

        Returns:
            NoteAnalysis snapshot
        """
        title = extract_title(text, fallback_title)
        word_count = count_words(text)

        analysis = NoteAnalysis(
            title=title,
            word_count=word_count,
            line_count=len(text.split('\n')),
            docs=self.analyze_docs(text, title),
            sheets=self.analyze_sheets(text),
            slides=self.analyze_slides(text, title),
            forms=self.analyze_forms(text, title),
        )

        logger.debug(
            "Analyzed '%s': %d words, %d headings, %d tables, %d slides, %d questions",
            title, word_count, len(analysis.docs.headings), len(analysis.sheets.tables),
            len(analysis.slides.slides), len(analysis.forms.questions),
        )
        return analysis

    # -------------------------------------------------------------------------
    # Docs
    # -------------------------------------------------------------------------

    def analyze_docs(self, text: str, title: str) -> DocsAnalysis:
        headings = extract_headings(text)
        paragraph_count = count_paragraphs(text)
        word_count = count_words(text)
        pages = estimate_pages(word_count, self.settings.words_per_page)

        return DocsAnalysis(
            suggested_title=title,
            headings=headings,
            paragraph_count=paragraph_count,
            has_images=bool(IMAGE_PATTERN.search(text)),
            has_links=bool(LINK_PATTERN.search(text)),
            has_tables=bool(TABLE_HINT_PATTERN.search(text)),
            estimated_pages=pages,
            content_type=self.classify_content(text, headings, paragraph_count),
            summary=self._docs_summary(headings, paragraph_count, word_count, pages),
        )

    def classify_content(self, text: str, headings: List[Heading], paragraph_count: int) -> str:
        """
        Classify the note as article / report / letter / notes / general.

        Rules run in order and a later match overwrites an earlier one, so
        "notes" beats "article" when both hold.
        """
        content_type = "general"
        if len(headings) >= ARTICLE_MIN_HEADINGS and paragraph_count >= ARTICLE_MIN_PARAGRAPHS:
            content_type = "article"
        if self.keywords.report_pattern.search(text):
            content_type = "report"
        if self.keywords.letter_pattern.search(text):
            content_type = "letter"
        if len(headings) <= NOTES_MAX_HEADINGS and paragraph_count <= NOTES_MAX_PARAGRAPHS:
            content_type = "notes"
        return content_type

    @staticmethod
    def _docs_summary(headings: List[Heading], paragraph_count: int, word_count: int, pages: int) -> str:
        parts = [f"{word_count} words, ~{pages} pages"]
        if headings:
            parts.append(f"{len(headings)} sections")
        parts.append(f"{paragraph_count} paragraphs")
        return ' | '.join(parts)

    # -------------------------------------------------------------------------
    # Sheets
    # -------------------------------------------------------------------------

    def analyze_sheets(self, text: str) -> SheetsAnalysis:
        tables = extract_tables(text)
        lists = extract_lists(text)
        numerical_data = extract_numerical_data(text)

        chart_type = "none"
        if len(numerical_data) >= 2:
            chart_type = "pie" if len(numerical_data) <= PIE_CHART_MAX_POINTS else "bar"
        # A long first table always means a bar chart
        if tables and len(tables[0].rows) > BAR_CHART_MIN_ROWS:
            chart_type = "bar"

        return SheetsAnalysis(
            tables=tables,
            lists=lists,
            numerical_data=numerical_data,
            suggested_chart_type=chart_type,
            has_tabulable_content=bool(tables or lists or numerical_data),
        )

    # -------------------------------------------------------------------------
    # Slides
    # -------------------------------------------------------------------------

    def analyze_slides(self, text: str, title: str) -> SlidesAnalysis:
        slides = [SlideProposal(title=title, bullet_points=[], layout="title", speaker_notes="Introduction")]

        for section in split_into_sections(text):
            bullets = extract_bullet_points(section.content, self.settings.fallback_sentence_count)
            slides.append(SlideProposal(
                title=section.heading,
                bullet_points=bullets[:self.settings.max_slide_bullets],
                layout="title_body" if bullets else "title",
                speaker_notes=generate_speaker_notes(section.content),
            ))

        theme = "academic" if self.keywords.academic_pattern.search(text) else "professional"
        minutes = max(1, math.ceil(len(slides) * self.settings.minutes_per_slide))

        return SlidesAnalysis(
            suggested_title=title,
            slides=slides,
            estimated_duration=f"~{minutes} min",
            duration_minutes=minutes,
            theme=theme,
        )

    # -------------------------------------------------------------------------
    # Forms
    # -------------------------------------------------------------------------

    def analyze_forms(self, text: str, title: str) -> FormsAnalysis:
        questions = detect_questions(
            text,
            keywords=self.keywords,
            window=self.settings.option_window,
            max_bullets=self.settings.max_bullet_options,
            max_length=self.settings.max_option_length,
        )
        has_answer_key = detect_answer_key(text, self.keywords)

        is_quiz_likely = (
            has_answer_key
            or any(q.correct_answer is not None for q in questions)
            or bool(self.keywords.quiz_pattern.search(text))
        )
        is_survey_likely = (
            bool(self.keywords.survey_pattern.search(text))
            or any(q.type == "scale" for q in questions)
        )

        if is_quiz_likely:
            form_type = "quiz"
        elif is_survey_likely:
            form_type = "survey"
        elif self.keywords.feedback_pattern.search(text):
            form_type = "feedback"
        elif self.keywords.registration_pattern.search(text):
            form_type = "registration"
        else:
            form_type = "general"

        if form_type == "quiz":
            description = f"Quiz with {len(questions)} questions generated from note content"
        elif form_type == "survey":
            description = f"Survey with {len(questions)} questions to gather responses"
        else:
            description = f"Form with {len(questions)} questions based on note content"

        return FormsAnalysis(
            form_type=form_type,
            suggested_title=title,
            description=description,
            questions=questions,
            has_answer_key=has_answer_key,
            is_quiz_likely=is_quiz_likely,
            is_survey_likely=is_survey_likely,
        )


def analyze_note(text: str, fallback_title: str) -> NoteAnalysis:
    """Analyze with default settings and vocabulary."""
    return NoteAnalyzer().analyze(text, fallback_title)
