#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Question Detector - find quiz / survey questions in free-form Markdown.

Each line goes through four independent passes, in this order:

1. Line ends with "?"              -> options below decide multiple_choice /
                                      dropdown / short_answer; a marked
                                      correct answer is looked up too
2. "Q:" / "Question 3." prefix     -> only when the line does NOT end with "?"
3. Rating keyword and a digit      -> scale
4. describe / explain / elaborate  -> paragraph, not required

A line may produce several questions; duplicates (same lower-cased text) are
dropped afterwards, keeping the first one seen.
"""

from typing import List, Optional

from .models import DetectedQuestion
from .patterns import (
    BULLET_ITEM_PATTERN,
    CHECK_SYMBOL_PATTERN,
    CHECKBOX_OPTION_PATTERN,
    CHECKED_MARK_PATTERN,
    CHECKED_OPTION_PATTERN,
    DEFAULT_KEYWORDS,
    DIGIT_PATTERN,
    KeywordTable,
    LETTER_OPTION_PATTERN,
    OPTION_MARKER_PATTERN,
    QUESTION_PREFIX_PATTERN,
)
from config.constants import (
    MAX_BULLET_OPTIONS,
    MAX_MULTIPLE_CHOICE_OPTIONS,
    MAX_OPTION_LENGTH,
    MIN_QUESTION_LENGTH,
    OPTION_WINDOW,
)
from config.logging_config import get_logger

logger = get_logger(__name__)


def strip_question_prefix(line: str) -> str:
    """Drop leading list / heading / numbering marks."""
    return QUESTION_PREFIX_PATTERN.sub('', line).strip()


def collect_options(
    lines: List[str],
    start: int,
    window: int = OPTION_WINDOW,
    max_bullets: int = MAX_BULLET_OPTIONS,
    max_length: int = MAX_OPTION_LENGTH,
) -> List[str]:
    """
    Collect answer options from the lines following a question.

    Recognizes lettered options (a) / A.), checkboxes (- [ ] / - [x]) and
    short plain bullets. Once something was collected, a blank line or a
    non-list line ends the scan.
    """
    options: List[str] = []

    for line in lines[start:start + window]:
        line = line.strip()

        letter = LETTER_OPTION_PATTERN.match(line)
        checkbox = CHECKBOX_OPTION_PATTERN.match(line)
        bullet = BULLET_ITEM_PATTERN.match(line)

        if letter:
            options.append(letter.group(1).strip())
        elif checkbox:
            options.append(checkbox.group(1).strip())
        elif bullet and len(options) < max_bullets:
            text = bullet.group(1).strip()
            if len(text) < max_length:
                options.append(text)
        elif line == '' and options:
            break
        elif line and not line.startswith(('-', '*')) and options:
            break

    return options


def detect_correct_option(
    lines: List[str],
    start: int,
    keywords: KeywordTable = DEFAULT_KEYWORDS,
    window: int = OPTION_WINDOW,
) -> Optional[str]:
    """
    Find the option marked as correct below a question.

    "[x] option" wins; otherwise a line carrying a check mark or a
    correctness keyword is cleaned of the marker and option prefix.
    """
    for line in lines[start:start + window]:
        line = line.strip()

        if CHECKED_MARK_PATTERN.search(line):
            match = CHECKED_OPTION_PATTERN.search(line)
            return match.group(1).strip() if match else None

        if keywords.correct_marker_pattern.search(line):
            cleaned = keywords.correct_marker_pattern.sub('', line)
            cleaned = OPTION_MARKER_PATTERN.sub('', cleaned).strip()
            return cleaned or None

    return None


def detect_answer_key(text: str, keywords: KeywordTable = DEFAULT_KEYWORDS) -> bool:
    """True when the note carries an answer key, checked boxes or check marks."""
    return bool(
        keywords.answer_key_pattern.search(text)
        or CHECKED_MARK_PATTERN.search(text)
        or CHECK_SYMBOL_PATTERN.search(text)
    )


def _choice_type(options: List[str]) -> str:
    if len(options) >= 2:
        return "multiple_choice" if len(options) <= MAX_MULTIPLE_CHOICE_OPTIONS else "dropdown"
    return "short_answer"


def _deduplicate(questions: List[DetectedQuestion]) -> List[DetectedQuestion]:
    seen = set()
    unique: List[DetectedQuestion] = []
    for question in questions:
        if question.key in seen:
            continue
        seen.add(question.key)
        unique.append(question)
    return unique


def detect_questions(
    text: str,
    keywords: KeywordTable = DEFAULT_KEYWORDS,
    window: int = OPTION_WINDOW,
    max_bullets: int = MAX_BULLET_OPTIONS,
    max_length: int = MAX_OPTION_LENGTH,
) -> List[DetectedQuestion]:
    """
    Detect questions in a note.

    Args:
        text: Markdown note
        keywords: Vocabulary for prefixes, scale and prompt detection
        window: Lines scanned below a question for options
        max_bullets: Plain bullets collected as options
        max_length: Bullets this long or longer are not options

    Returns:
        Questions in document order, de-duplicated by lower-cased text
    """
    questions: List[DetectedQuestion] = []
    lines = text.split('\n')

    for index, raw_line in enumerate(lines):
        line = raw_line.strip()

        # Pass 1: "...?"
        if line.endswith('?') and len(line) > MIN_QUESTION_LENGTH:
            options = collect_options(lines, index + 1, window, max_bullets, max_length)
            questions.append(DetectedQuestion(
                text=strip_question_prefix(line),
                type=_choice_type(options),
                options=options,
                required=True,
                correct_answer=detect_correct_option(lines, index + 1, keywords, window),
            ))

        # Pass 2: "Q: ..." that does not end with "?"
        prefix = keywords.question_prefix_pattern.match(line)
        if prefix and not line.endswith('?'):
            options = collect_options(lines, index + 1, window, max_bullets, max_length)
            questions.append(DetectedQuestion(
                text=prefix.group(1).strip(),
                type="multiple_choice" if len(options) >= 2 else "short_answer",
                options=options,
                required=True,
            ))

        # Pass 3: rating scale
        if keywords.scale_pattern.search(line) and DIGIT_PATTERN.search(line):
            questions.append(DetectedQuestion(
                text=strip_question_prefix(line),
                type="scale",
                required=True,
            ))

        # Pass 4: open-ended prompt
        stripped = strip_question_prefix(line)
        if keywords.paragraph_prompt_pattern.match(stripped):
            questions.append(DetectedQuestion(
                text=stripped,
                type="paragraph",
                required=False,
            ))

    unique = _deduplicate(questions)
    logger.debug("Detected %d questions (%d before de-duplication)", len(unique), len(questions))
    return unique
