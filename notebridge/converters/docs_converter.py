#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Docs Converter - documents to Markdown and Markdown to edit operations.

Reading: paragraph styles map to heading marks, run styles to inline
markers, tables to pipe tables.

Writing: each Markdown line becomes one inserted paragraph. Headings get a
paragraph style, bold / italic spans get text styles covering the span as
written (markers included, since the markers are inserted verbatim).
"""

import re
from typing import Any, Dict, List, Union

from .edit_requests import (
    DocumentCursor,
    EditOperation,
    UpdateParagraphStyle,
    UpdateTextStyle,
    utf16_len,
)
from ..analysis.patterns import BULLET_ITEM_PATTERN, HEADING_PATTERN, NUMBERED_ITEM_PATTERN
from ..workspace import load_model
from ..workspace.docs import Document, Paragraph, StructuralElement, Table, TextStyle
from config.logging_config import get_logger

logger = get_logger(__name__)

DocumentLike = Union[Document, Dict[str, Any]]

BOLD_SPAN_PATTERN = re.compile(r'\*\*([^*]+)\*\*|__([^_]+)__')
ITALIC_SPAN_PATTERN = re.compile(r'(?<!\*)\*([^*]+)\*(?!\*)|(?<!_)_([^_]+)_(?!_)')
RUN_SPLIT_PATTERN = re.compile(r'^(\s*)(.*?)(\s*)$', re.DOTALL)

BULLET_GLYPH = '• '


class DocsConverter:
    """
    Usage:
        markdown = DocsConverter.to_markdown(document_json)
        requests = DocsConverter.markdown_to_batch(markdown)
    """

    HEADING_PREFIXES = {
        'HEADING_1': '# ',
        'HEADING_2': '## ',
        'HEADING_3': '### ',
        'HEADING_4': '#### ',
        'HEADING_5': '##### ',
        'HEADING_6': '###### ',
        'TITLE': '# ',
    }

    # -------------------------------------------------------------------------
    # Document -> Markdown
    # -------------------------------------------------------------------------

    @classmethod
    def to_markdown(cls, document: DocumentLike) -> str:
        """
        Render a document as Markdown.

        Args:
            document: Document model or raw API JSON

        Returns:
            Markdown starting with '# <title>'

        Raises:
            InvalidDocumentError: payload cannot be read as a document
        """
        doc = load_model(Document, document)
        lines = [f"# {doc.title}", ""]

        if doc.body is None:
            return '\n'.join(lines)

        for element in doc.body.content:
            if element.paragraph is not None:
                paragraph_md = cls._convert_paragraph(element.paragraph)
                if paragraph_md:
                    lines.append(paragraph_md)
            elif element.table is not None:
                table_md = cls._convert_table(element.table)
                if table_md:
                    lines.append(table_md)
                    lines.append("")

        logger.debug("Converted document '%s' (%d blocks)", doc.title, len(doc.body.content))
        return '\n'.join(lines)

    @staticmethod
    def _style_run(content: str, style: TextStyle) -> str:
        """Wrap the non-whitespace core of a run in its inline markers."""
        leading, core, trailing = RUN_SPLIT_PATTERN.match(content).groups()
        if not core:
            return content

        if style.bold:
            core = f"**{core}**"
        if style.italic:
            core = f"*{core}*"
        if style.strikethrough:
            core = f"~~{core}~~"
        if style.link is not None and style.link.url:
            core = f"[{core}]({style.link.url})"

        return f"{leading}{core}{trailing}"

    @classmethod
    def _convert_paragraph(cls, paragraph: Paragraph) -> str:
        parts = []
        for element in paragraph.elements:
            run = element.text_run
            if run is None:
                continue
            if run.text_style is not None:
                parts.append(cls._style_run(run.content, run.text_style))
            else:
                parts.append(run.content)

        text = ''.join(parts)
        if text.endswith('\n'):
            text = text[:-1]
        if not text.strip():
            return ''

        style = paragraph.paragraph_style.named_style_type if paragraph.paragraph_style else None
        if style in cls.HEADING_PREFIXES:
            return cls.HEADING_PREFIXES[style] + text
        if style == 'SUBTITLE':
            return f"*{text}*"
        return text

    @staticmethod
    def _cell_text(content: List[StructuralElement]) -> str:
        text = ''
        for block in content:
            if block.paragraph is None:
                continue
            for element in block.paragraph.elements:
                if element.text_run is not None and element.text_run.content:
                    text += element.text_run.content.replace('\n', ' ').strip()
        return text.replace('|', '\\|')

    @classmethod
    def _convert_table(cls, table: Table) -> str:
        rows = []
        for index, table_row in enumerate(table.table_rows):
            cells = [cls._cell_text(cell.content) for cell in table_row.table_cells]
            rows.append(f"| {' | '.join(cells)} |")
            if index == 0:
                rows.append(f"| {' | '.join(['---'] * len(cells))} |")
        return '\n'.join(rows)

    @classmethod
    def extract_plain_text(cls, document: DocumentLike) -> str:
        """Concatenated text of every paragraph run, newlines included."""
        doc = load_model(Document, document)
        if doc.body is None:
            return ''

        chunks = []
        for element in doc.body.content:
            if element.paragraph is None:
                continue
            for paragraph_element in element.paragraph.elements:
                run = paragraph_element.text_run
                if run is not None and run.content:
                    chunks.append(run.content)
        return ''.join(chunks)

    # -------------------------------------------------------------------------
    # Markdown -> edit operations
    # -------------------------------------------------------------------------

    @staticmethod
    def _parse_line(line: str):
        """Return (text, named_style_type or None, is_list_item)."""
        heading = HEADING_PATTERN.match(line)
        if heading:
            return heading.group(2), f"HEADING_{len(heading.group(1))}", False

        bullet = BULLET_ITEM_PATTERN.match(line)
        if bullet:
            return BULLET_GLYPH + bullet.group(1), None, True

        numbered = NUMBERED_ITEM_PATTERN.match(line)
        if numbered:
            return numbered.group(1), None, True

        return line, None, False

    @staticmethod
    def _text_style_operations(text: str, start_index: int) -> List[UpdateTextStyle]:
        operations: List[UpdateTextStyle] = []

        for match in BOLD_SPAN_PATTERN.finditer(text):
            inner = match.group(1) or match.group(2)
            start = start_index + utf16_len(text[:match.start()])
            operations.append(UpdateTextStyle(start_index=start, end_index=start + utf16_len(inner) + 4, bold=True))

        for match in ITALIC_SPAN_PATTERN.finditer(text):
            inner = match.group(1) or match.group(2)
            start = start_index + utf16_len(text[:match.start()])
            operations.append(UpdateTextStyle(start_index=start, end_index=start + utf16_len(inner) + 2, italic=True))

        return operations

    @classmethod
    def markdown_to_requests(cls, markdown: str) -> List[EditOperation]:
        """
        Translate Markdown into ordered edit operations.

        Args:
            markdown: Markdown text

        Returns:
            InsertText / UpdateParagraphStyle / UpdateTextStyle operations,
            with indices counted from 1 across the whole document
        """
        operations: List[EditOperation] = []
        cursor = DocumentCursor()

        for line in markdown.split('\n'):
            text, style, is_list_item = cls._parse_line(line)

            if not text and not is_list_item:
                operations.append(cursor.insert('\n'))
                continue

            insert = cursor.insert(text + '\n')
            operations.append(insert)

            if style:
                operations.append(UpdateParagraphStyle(
                    start_index=insert.index,
                    end_index=insert.end_index,
                    named_style_type=style,
                ))

            operations.extend(cls._text_style_operations(text, insert.index))

        logger.debug("Built %d edit operations, final index %d", len(operations), cursor.index)
        return operations

    @classmethod
    def markdown_to_batch(cls, markdown: str) -> List[Dict[str, Any]]:
        """Same as markdown_to_requests, as batchUpdate request dicts."""
        return [operation.to_request() for operation in cls.markdown_to_requests(markdown)]
