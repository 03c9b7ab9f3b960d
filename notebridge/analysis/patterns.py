#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Note Analysis Patterns - Regex patterns and keyword tables for EN + KO notes.

Covers:
- Markdown structure (headings, bullets, numbered items, pipe tables)
- Numeric "label: value" lines
- Question prefixes, rating scales, open-ended prompts
- Quiz / survey / feedback / registration vocabulary
- Academic, report and letter openers

Keyword lists are grouped per locale in KeywordTable so detection code can be
handed a different vocabulary without touching the heuristics.
"""

import re
from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, Iterable, List, Pattern


# =============================================================================
# MARKDOWN STRUCTURE PATTERNS
# =============================================================================

# "# Title" .. "###### Title"
HEADING_PATTERN = re.compile(r'^(#{1,6})[ \t]+(.+)$')

# Section boundaries only come from level 1-3 headings
SECTION_HEADING_PATTERN = re.compile(r'^(#{1,3})[ \t]+(.+)$')

# First H1 anywhere in the note
H1_PATTERN = re.compile(r'^#[ \t]+(.+)$', re.MULTILINE)

# Front-matter style "title: ..." line
YAML_TITLE_PATTERN = re.compile(r'^title:[ \t]*(.+)$', re.MULTILINE)

# Leading "---\n...\n---" block
FRONT_MATTER_PATTERN = re.compile(r'\A---[\s\S]*?---\n?')

# Trailing ".md" / ".markdown" on a note file name
MARKDOWN_SUFFIX_PATTERN = re.compile(r'\.(md|markdown)$', re.IGNORECASE)

# Unordered item: "- text" / "* text"
BULLET_ITEM_PATTERN = re.compile(r'^[\-\*]\s+(.+)$')

# Ordered item: "1. text"
NUMBERED_ITEM_PATTERN = re.compile(r'^\d+\.\s+(.+)$')

# Leading heading marks stripped from list titles
HEADING_MARK_PATTERN = re.compile(r'^#{1,6}\s+')

# Separator row: only pipes, dashes, colons and whitespace between outer pipes
TABLE_SEPARATOR_PATTERN = re.compile(r'^\|[\s\-:|]+\|$')

# Blank-line-delimited blocks
PARAGRAPH_SPLIT_PATTERN = re.compile(r'\n\n+')

# Sentence boundary used for pseudo-bullets and speaker notes
SENTENCE_SPLIT_PATTERN = re.compile(r'[.!?]\s+')

# Inline content markers
IMAGE_PATTERN = re.compile(r'!\[.*?\]\(.*?\)')
LINK_PATTERN = re.compile(r'\[.*?\]\(.*?\)')
TABLE_HINT_PATTERN = re.compile(r'\|.*\|.*\|')


# =============================================================================
# NUMERIC DATA PATTERNS
# =============================================================================

# Units allowed after a number: percent plus Korean count/currency counters
NUMERIC_UNITS = ['%', '명', '개', '원', '달러', '건']

# "[- ]Label: 1,234.5 [unit]" with separators : = - – —
NUMERIC_LINE_PATTERN = re.compile(
    r'^[\-\*]?\s*(.+?)\s*[:=\-–—]\s*([\d,]+\.?\d*)\s*('
    + '|'.join(re.escape(unit) for unit in NUMERIC_UNITS)
    + r')?$'
)


# =============================================================================
# QUESTION OPTION PATTERNS
# =============================================================================

# "-", "*", digits, dots and "#" in front of a question line
QUESTION_PREFIX_PATTERN = re.compile(r'^[\-\*\d.#]+\s*')

# a) b) c) / A. B. C.
LETTER_OPTION_PATTERN = re.compile(r'^[a-eA-E][.)]\s*(.+)')

# - [ ] option / - [x] option
CHECKBOX_OPTION_PATTERN = re.compile(r'^[\-\*]\s*\[[ xX]?\]\s*(.+)')

# Marked answer "[x] option"
CHECKED_MARK_PATTERN = re.compile(r'\[x\]', re.IGNORECASE)
CHECKED_OPTION_PATTERN = re.compile(r'\[x\]\s*(.+)', re.IGNORECASE)

# Check mark symbols
CHECK_SYMBOLS = ['✓', '✅']
CHECK_SYMBOL_PATTERN = re.compile('|'.join(CHECK_SYMBOLS))

# Option markers removed from a line flagged as correct
OPTION_MARKER_PATTERN = re.compile(r'^[\-\*a-eA-E.)\s]+')

DIGIT_PATTERN = re.compile(r'\d')


# =============================================================================
# KEYWORD TABLES
# =============================================================================

def _alternation(words: Iterable[str]) -> str:
    words = list(words)
    if not words:
        return '(?!)'  # never matches
    return '|'.join(words)


@dataclass(frozen=True)
class KeywordTable:
    """
    Vocabulary used by the heuristics, one list per concern.

    Entries are regex fragments (most are plain words). Tables for several
    locales are merged with `merge_keyword_tables`.
    """
    question_prefixes: List[str] = field(default_factory=list)
    scale_keywords: List[str] = field(default_factory=list)
    paragraph_prompts: List[str] = field(default_factory=list)
    correct_markers: List[str] = field(default_factory=list)
    answer_key_markers: List[str] = field(default_factory=list)
    quiz_keywords: List[str] = field(default_factory=list)
    survey_keywords: List[str] = field(default_factory=list)
    feedback_keywords: List[str] = field(default_factory=list)
    registration_keywords: List[str] = field(default_factory=list)
    report_openers: List[str] = field(default_factory=list)
    letter_openers: List[str] = field(default_factory=list)
    academic_openers: List[str] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Compiled patterns
    # -------------------------------------------------------------------------

    @cached_property
    def question_prefix_pattern(self) -> Pattern:
        """'Q:' / 'Question 3.' / localized prefix, capturing the question text."""
        return re.compile(
            rf'^(?:{_alternation(self.question_prefixes)})[:.)]\s*(.+)',
            re.IGNORECASE,
        )

    @cached_property
    def scale_pattern(self) -> Pattern:
        return re.compile(_alternation(self.scale_keywords), re.IGNORECASE)

    @cached_property
    def paragraph_prompt_pattern(self) -> Pattern:
        return re.compile(rf'^(?:{_alternation(self.paragraph_prompts)})', re.IGNORECASE)

    @cached_property
    def correct_marker_pattern(self) -> Pattern:
        words = CHECK_SYMBOLS + list(self.correct_markers)
        return re.compile(_alternation(words), re.IGNORECASE)

    @cached_property
    def answer_key_pattern(self) -> Pattern:
        return re.compile(_alternation(self.answer_key_markers), re.IGNORECASE)

    @cached_property
    def quiz_pattern(self) -> Pattern:
        return re.compile(_alternation(self.quiz_keywords), re.IGNORECASE)

    @cached_property
    def survey_pattern(self) -> Pattern:
        return re.compile(_alternation(self.survey_keywords), re.IGNORECASE)

    @cached_property
    def feedback_pattern(self) -> Pattern:
        return re.compile(_alternation(self.feedback_keywords), re.IGNORECASE)

    @cached_property
    def registration_pattern(self) -> Pattern:
        return re.compile(_alternation(self.registration_keywords), re.IGNORECASE)

    @cached_property
    def report_pattern(self) -> Pattern:
        return re.compile(rf'^(?:{_alternation(self.report_openers)})', re.IGNORECASE | re.MULTILINE)

    @cached_property
    def letter_pattern(self) -> Pattern:
        return re.compile(rf'^(?:{_alternation(self.letter_openers)})', re.IGNORECASE | re.MULTILINE)

    @cached_property
    def academic_pattern(self) -> Pattern:
        return re.compile(rf'^(?:{_alternation(self.academic_openers)})', re.IGNORECASE | re.MULTILINE)


KEYWORDS_EN = KeywordTable(
    question_prefixes=[r'Q\d*', r'Question\s*\d*'],
    scale_keywords=['rate', 'scale'],
    paragraph_prompts=['describe', 'explain', 'elaborate'],
    correct_markers=['correct'],
    answer_key_markers=[r'answer\s*key', r'answers?:'],
    quiz_keywords=['quiz', 'test', 'exam'],
    survey_keywords=['survey', 'feedback', 'opinion', 'rating', 'satisfaction'],
    feedback_keywords=['feedback'],
    registration_keywords=['register', r'sign.?up'],
    report_openers=['abstract', 'introduction', 'conclusion', 'references'],
    letter_openers=['dear', 'sincerely', 'regards'],
    academic_openers=['abstract', 'introduction', 'methodology', 'results', 'conclusion', 'references'],
)

KEYWORDS_KO = KeywordTable(
    question_prefixes=[r'질문\s*\d*'],
    scale_keywords=['평가', '척도'],
    paragraph_prompts=['서술', '설명'],
    correct_markers=['정답'],
    answer_key_markers=['정답', '해답'],
    quiz_keywords=['시험', '퀴즈'],
    survey_keywords=['설문', '조사', '의견'],
    feedback_keywords=['피드백'],
    registration_keywords=['등록', '신청'],
)

KEYWORD_TABLES: Dict[str, KeywordTable] = {
    "en": KEYWORDS_EN,
    "ko": KEYWORDS_KO,
}


def merge_keyword_tables(*tables: KeywordTable) -> KeywordTable:
    """Concatenate keyword lists field by field, dropping duplicates."""
    merged: Dict[str, List[str]] = {}
    for table in tables:
        for name in KeywordTable.__dataclass_fields__:
            bucket = merged.setdefault(name, [])
            for word in getattr(table, name):
                if word not in bucket:
                    bucket.append(word)
    return KeywordTable(**merged)


def keywords_for_locales(locales: Iterable[str]) -> KeywordTable:
    """
    Build the keyword table for the given locale codes.

    Unknown codes are ignored; an empty selection falls back to English.
    """
    tables = [KEYWORD_TABLES[code] for code in locales if code in KEYWORD_TABLES]
    if not tables:
        tables = [KEYWORDS_EN]
    return merge_keyword_tables(*tables)


DEFAULT_KEYWORDS = keywords_for_locales(["en", "ko"])
