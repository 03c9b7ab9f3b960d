#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Note analysis - heuristics that turn a Markdown note into structured
proposals for documents, spreadsheets, presentations and forms.
"""

from .models import (
    StructuredTable,
    StructuredList,
    NumericDatum,
    Heading,
    Section,
    DetectedQuestion,
    SlideProposal,
    DocsAnalysis,
    SheetsAnalysis,
    SlidesAnalysis,
    FormsAnalysis,
    NoteAnalysis,
)
from .patterns import (
    KeywordTable,
    KEYWORDS_EN,
    KEYWORDS_KO,
    KEYWORD_TABLES,
    DEFAULT_KEYWORDS,
    keywords_for_locales,
    merge_keyword_tables,
)
from .extractors import extract_tables, extract_lists, extract_numerical_data
from .sections import (
    extract_headings,
    split_into_sections,
    extract_bullet_points,
    generate_speaker_notes,
)
from .questions import (
    detect_questions,
    collect_options,
    detect_correct_option,
    detect_answer_key,
)
from .analyzer import NoteAnalyzer, analyze_note, extract_title, count_words, count_paragraphs

__all__ = [
    # Models
    "StructuredTable",
    "StructuredList",
    "NumericDatum",
    "Heading",
    "Section",
    "DetectedQuestion",
    "SlideProposal",
    "DocsAnalysis",
    "SheetsAnalysis",
    "SlidesAnalysis",
    "FormsAnalysis",
    "NoteAnalysis",
    # Keyword tables
    "KeywordTable",
    "KEYWORDS_EN",
    "KEYWORDS_KO",
    "KEYWORD_TABLES",
    "DEFAULT_KEYWORDS",
    "keywords_for_locales",
    "merge_keyword_tables",
    # Extraction
    "extract_tables",
    "extract_lists",
    "extract_numerical_data",
    "extract_headings",
    "split_into_sections",
    "extract_bullet_points",
    "generate_speaker_notes",
    # Questions
    "detect_questions",
    "collect_options",
    "detect_correct_option",
    "detect_answer_key",
    # Analyzer
    "NoteAnalyzer",
    "analyze_note",
    "extract_title",
    "count_words",
    "count_paragraphs",
]
