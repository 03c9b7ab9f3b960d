#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Slides Converter - presentations to Markdown and back.

Markdown layout produced by to_markdown():

    # Deck title

    *3 slides*

    ---

    ## Slide 1: Title
    - body line
    > **Notes:** speaker notes

    ---
    ...

parse_markdown_to_slides() reads that layout (or any '---'-separated
Markdown) back into title / body pairs, and build_presentation() turns
those pairs into a Presentation model.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from ..analysis.models import SlideProposal
from ..analysis.patterns import BULLET_ITEM_PATTERN, HEADING_PATTERN
from ..workspace import load_model
from ..workspace.slides import (
    NotesProperties,
    Page,
    PageElement,
    Presentation,
    Shape,
    SlideProperties,
    Table,
    TextContent,
    TextElement,
    TextRun,
)
from config.logging_config import get_logger

logger = get_logger(__name__)

PresentationLike = Union[Presentation, Dict[str, Any]]

SLIDE_HEADING_PATTERN = re.compile(r'^##\s+Slide\s+\d+:?\s*(.*)$', re.IGNORECASE)
SLIDE_SEPARATOR = '---'
NOTES_PREFIX = '> **Notes:** '
UNTITLED_SLIDE = '(Untitled slide)'


@dataclass(frozen=True)
class ParsedSlide:
    title: str
    body: List[str] = field(default_factory=list)


class SlidesConverter:
    """
    Usage:
        markdown = SlidesConverter.to_markdown(presentation_json)
        slides = SlidesConverter.parse_markdown_to_slides(markdown)
    """

    # -------------------------------------------------------------------------
    # Presentation -> Markdown
    # -------------------------------------------------------------------------

    @classmethod
    def to_markdown(cls, presentation: PresentationLike) -> str:
        """
        Render a deck as Markdown, one '## Slide N' block per slide.

        Raises:
            InvalidDocumentError: payload cannot be read as a presentation
        """
        deck = load_model(Presentation, presentation)
        total = len(deck.slides)
        lines = [f"# {deck.title}", "", f"*{total} slides*", "", SLIDE_SEPARATOR, ""]

        for number, slide in enumerate(deck.slides, start=1):
            title, body, notes = cls.extract_slide_content(slide)

            lines.append(f"## Slide {number}: {title}" if title else f"## Slide {number}")
            lines.append("")

            if body:
                for item in body:
                    if item.startswith('|'):
                        lines.append(item)
                    elif item.strip():
                        lines.append(f"- {item}")
                lines.append("")

            if notes:
                lines.append(NOTES_PREFIX + notes)
                lines.append("")

            if number < total:
                lines.append(SLIDE_SEPARATOR)
                lines.append("")

        logger.debug("Converted presentation '%s' (%d slides)", deck.title, total)
        return '\n'.join(lines)

    @classmethod
    def extract_slide_content(cls, slide: Page) -> Tuple[str, List[str], str]:
        """
        Split a slide into (title, body lines, speaker notes).

        The first shape with text is the title; later text shapes give one
        body line per non-blank line. Tables and images become one body
        entry each.
        """
        title = ''
        body: List[str] = []

        for element in slide.page_elements:
            if element.shape is not None and element.shape.text is not None:
                text = cls.text_from_content(element.shape.text)
                if text.strip():
                    if not title:
                        title = text.strip()
                    else:
                        body.extend(line for line in text.split('\n') if line.strip())

            if element.table is not None:
                table_md = cls._table_to_markdown(element.table)
                if table_md:
                    body.append(table_md)

            if element.image is not None:
                url = element.image.content_url or element.image.source_url
                if url:
                    body.append(f"![Image]({url})")

        return title, body, cls.speaker_notes(slide)

    @classmethod
    def speaker_notes(cls, slide: Page) -> str:
        """Text of the speaker-notes shape on the slide's notes page, on one line."""
        properties = slide.slide_properties
        if properties is None or properties.notes_page is None:
            return ''

        notes_page = properties.notes_page
        if notes_page.notes_properties is None:
            return ''
        notes_id = notes_page.notes_properties.speaker_notes_object_id

        for element in notes_page.page_elements:
            if element.object_id == notes_id and element.shape is not None and element.shape.text is not None:
                text = cls.text_from_content(element.shape.text)
                return ' '.join(line.strip() for line in text.split('\n') if line.strip())
        return ''

    @staticmethod
    def text_from_content(content: Optional[TextContent]) -> str:
        if content is None:
            return ''

        parts = []
        for element in content.text_elements:
            run = element.text_run
            if run is None or not run.content:
                continue
            text = run.content
            if run.style is not None and text.strip():
                if run.style.bold:
                    text = f"**{text.strip()}** "
                if run.style.italic:
                    text = f"*{text.strip()}* "
            parts.append(text)
        return ''.join(parts)

    @classmethod
    def _table_to_markdown(cls, table: Table) -> str:
        rows = []
        for index, table_row in enumerate(table.table_rows):
            cells = [
                cls.text_from_content(cell.text).strip().replace('|', '\\|').replace('\n', ' ')
                for cell in table_row.table_cells
            ]
            rows.append(f"| {' | '.join(cells)} |")
            if index == 0:
                rows.append(f"| {' | '.join(['---'] * len(cells))} |")
        return '\n'.join(rows)

    # -------------------------------------------------------------------------
    # Markdown -> slides
    # -------------------------------------------------------------------------

    @staticmethod
    def _split_sections(markdown: str) -> List[List[str]]:
        sections: List[List[str]] = [[]]
        for line in markdown.split('\n'):
            if line.strip() == SLIDE_SEPARATOR:
                sections.append([])
            else:
                sections[-1].append(line)
        return sections

    @classmethod
    def parse_markdown_to_slides(cls, markdown: str) -> List[ParsedSlide]:
        """
        Read '---'-separated Markdown into slides.

        Title comes from '## Slide N: Title', else the first heading. List
        items and plain lines form the body; '>' lines are notes and are
        skipped. A leading section carrying the '*N slides*' line is the
        deck header and does not become a slide.
        """
        slides: List[ParsedSlide] = []

        for section in cls._split_sections(markdown):
            lines = [line.strip() for line in section if line.strip()]
            if not lines:
                continue

            title = ''
            body: List[str] = []
            has_slide_heading = False
            has_metadata = False

            for line in lines:
                slide_heading = SLIDE_HEADING_PATTERN.match(line)
                if slide_heading:
                    title = slide_heading.group(1).strip()
                    has_slide_heading = True
                    continue

                heading = HEADING_PATTERN.match(line)
                if heading and not title:
                    title = heading.group(2).strip()
                    continue

                item = BULLET_ITEM_PATTERN.match(line)
                if item:
                    body.append(item.group(1).strip())
                    continue

                if line.startswith('*') and line.endswith('*') and 'slide' in line.lower():
                    has_metadata = True
                    continue

                if not line.startswith('>'):
                    body.append(line)

            if has_metadata and not has_slide_heading and not slides:
                continue

            if title or body or has_slide_heading:
                slides.append(ParsedSlide(title=title, body=body))

        logger.debug("Parsed %d slides from Markdown", len(slides))
        return slides

    @classmethod
    def generate_slide_summary(cls, presentation: PresentationLike) -> str:
        """Deck title, slide count and a numbered outline of slide titles."""
        deck = load_model(Presentation, presentation)
        lines = [f"# {deck.title}", "", f"Total slides: {len(deck.slides)}", "", "## Outline", ""]
        for number, slide in enumerate(deck.slides, start=1):
            title, _, _ = cls.extract_slide_content(slide)
            lines.append(f"{number}. {title or UNTITLED_SLIDE}")
        return '\n'.join(lines)

    # -------------------------------------------------------------------------
    # Slides -> Presentation
    # -------------------------------------------------------------------------

    @staticmethod
    def _text_shape(object_id: str, text: str) -> PageElement:
        return PageElement(
            object_id=object_id,
            shape=Shape(
                shape_type='TEXT_BOX',
                text=TextContent(text_elements=[TextElement(text_run=TextRun(content=text + '\n'))]),
            ),
        )

    @classmethod
    def build_presentation(
        cls,
        title: str,
        slides: Sequence[Union[ParsedSlide, SlideProposal]],
    ) -> Presentation:
        """
        Build a Presentation model from parsed slides or slide proposals.

        Each slide gets a title shape, a body shape with one line per body
        entry, and a notes page when the proposal carries speaker notes.
        """
        pages = []
        for number, slide in enumerate(slides, start=1):
            if isinstance(slide, SlideProposal):
                body, notes = slide.bullet_points, slide.speaker_notes
            else:
                body, notes = slide.body, ''

            slide_id = f"slide_{number}"
            elements = []
            if slide.title:
                elements.append(cls._text_shape(f"{slide_id}_title", slide.title))
            if body:
                elements.append(cls._text_shape(f"{slide_id}_body", '\n'.join(body)))

            properties = None
            if notes:
                notes_id = f"{slide_id}_notes"
                properties = SlideProperties(notes_page=Page(
                    object_id=f"{slide_id}_notes_page",
                    page_elements=[cls._text_shape(notes_id, notes)],
                    notes_properties=NotesProperties(speaker_notes_object_id=notes_id),
                ))

            pages.append(Page(object_id=slide_id, page_elements=elements, slide_properties=properties))

        return Presentation(title=title, slides=pages)
