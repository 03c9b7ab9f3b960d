#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Heading / Section Splitter.

Turns Markdown into its heading outline and into heading-delimited sections,
plus the helpers that boil a section body down to slide bullets and speaker
notes.
"""

from typing import List

from .models import Heading, Section
from .patterns import (
    BULLET_ITEM_PATTERN,
    HEADING_PATTERN,
    NUMBERED_ITEM_PATTERN,
    SECTION_HEADING_PATTERN,
    SENTENCE_SPLIT_PATTERN,
)
from config.constants import (
    FALLBACK_SENTENCE_COUNT,
    MAX_SENTENCE_LENGTH,
    MIN_SENTENCE_LENGTH,
    SPEAKER_NOTE_SENTENCES,
)


def extract_headings(text: str) -> List[Heading]:
    """Every '#'..'######' heading in document order."""
    headings: List[Heading] = []
    for line in text.split('\n'):
        match = HEADING_PATTERN.match(line)
        if match:
            headings.append(Heading(level=len(match.group(1)), text=match.group(2).strip()))
    return headings


def split_into_sections(text: str) -> List[Section]:
    """
    Split on level 1-3 headings.

    Body lines are kept verbatim, blank lines included. A section with a
    heading is kept even when its body is empty; a heading-less section is
    kept only when its body has non-whitespace content.
    """
    sections: List[Section] = []

    heading = ''
    body: List[str] = []

    for line in text.split('\n'):
        match = SECTION_HEADING_PATTERN.match(line)
        if match:
            if heading or body:
                sections.append(Section(heading=heading, content='\n'.join(body)))
            heading = match.group(2).strip()
            body = []
        else:
            body.append(line)

    if heading or body:
        sections.append(Section(heading=heading, content='\n'.join(body)))

    return [s for s in sections if s.heading or s.content.strip()]


def _sentences(text: str) -> List[str]:
    return SENTENCE_SPLIT_PATTERN.split(text)


def extract_bullet_points(
    content: str,
    fallback_sentences: int = FALLBACK_SENTENCE_COUNT,
) -> List[str]:
    """
    Bullet and numbered items of a section body.

    Without any list item, falls back to the first sentences whose trimmed
    length is above MIN_SENTENCE_LENGTH and below MAX_SENTENCE_LENGTH.
    """
    bullets: List[str] = []
    for line in content.split('\n'):
        match = BULLET_ITEM_PATTERN.match(line) or NUMBERED_ITEM_PATTERN.match(line)
        if match:
            bullets.append(match.group(1).strip())

    if bullets:
        return bullets

    sentences = [
        s.strip() for s in _sentences(content)
        if MIN_SENTENCE_LENGTH < len(s.strip()) < MAX_SENTENCE_LENGTH
    ]
    return sentences[:fallback_sentences]


def generate_speaker_notes(content: str) -> str:
    """First sentences of the non-list text in a section body."""
    prose = '\n'.join(
        line for line in content.split('\n')
        if not (BULLET_ITEM_PATTERN.match(line) or NUMBERED_ITEM_PATTERN.match(line))
    ).strip()
    sentences = [s for s in _sentences(prose) if len(s.strip()) > MIN_SENTENCE_LENGTH]
    return '. '.join(sentences[:SPEAKER_NOTE_SENTENCES]).strip()
