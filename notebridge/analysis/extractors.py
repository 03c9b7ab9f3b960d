#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Structure Extractors - pull pipe tables, lists and numeric data out of Markdown.

All three scanners walk the note line by line. Tables and lists are small
two-state machines (outside / inside a block); numeric data is matched line
by line. Nothing here raises: text without structure yields empty lists.
"""

from typing import List, Optional

from .models import NumericDatum, StructuredList, StructuredTable
from .patterns import (
    BULLET_ITEM_PATTERN,
    HEADING_MARK_PATTERN,
    NUMBERED_ITEM_PATTERN,
    NUMERIC_LINE_PATTERN,
    TABLE_SEPARATOR_PATTERN,
)
from config.constants import MAX_LABEL_LENGTH


# =============================================================================
# TABLES
# =============================================================================

def is_table_row(line: str) -> bool:
    """Check if a stripped line is a pipe table row."""
    return line.startswith('|') and line.endswith('|')


def is_table_separator(line: str) -> bool:
    """Check if a stripped table row is a |---|:--:| separator."""
    return bool(TABLE_SEPARATOR_PATTERN.match(line))


def split_table_row(line: str) -> List[str]:
    """
    Split "| a | b |" into ["a", "b"].

    Outer pipes are removed and cells trimmed; escaped pipes are not treated
    specially.
    """
    return [cell.strip() for cell in line[1:-1].split('|')]


def extract_tables(text: str) -> List[StructuredTable]:
    """
    Extract pipe tables.

    The first non-separator row of a run becomes the header, later rows
    become data. Separator rows are skipped without opening or closing a
    table; any other non-table line closes the current one.
    """
    tables: List[StructuredTable] = []

    headers: List[str] = []
    rows: List[List[str]] = []
    start_line = -1
    in_table = False

    for index, raw_line in enumerate(text.split('\n')):
        line = raw_line.strip()

        if is_table_row(line):
            if is_table_separator(line):
                continue

            cells = split_table_row(line)
            if not in_table:
                headers = cells
                rows = []
                start_line = index
                in_table = True
            else:
                rows.append(cells)
            continue

        if in_table:
            tables.append(StructuredTable(headers=headers, rows=rows, start_line=start_line))
            in_table = False

    if in_table:
        tables.append(StructuredTable(headers=headers, rows=rows, start_line=start_line))

    return tables


# =============================================================================
# LISTS
# =============================================================================

def _list_title(lines: List[str], index: int) -> str:
    """Nearest non-blank line above `index`, without heading marks or a trailing colon."""
    for previous in reversed(lines[:index]):
        previous = previous.strip()
        if previous:
            title = HEADING_MARK_PATTERN.sub('', previous)
            if title.endswith(':'):
                title = title[:-1]
            return title
    return ''


def _match_list_item(line: str):
    """Return (content, is_numbered) for a list line, else None."""
    match = BULLET_ITEM_PATTERN.match(line)
    if match:
        return match.group(1), False
    match = NUMBERED_ITEM_PATTERN.match(line)
    if match:
        return match.group(1), True
    return None


def extract_lists(text: str) -> List[StructuredList]:
    """
    Extract runs of "- item" / "* item" / "1. item" lines.

    Items must start at column 0. The run's numbering comes from its first
    item; the run ends at the first line that is not an item.
    """
    lines = text.split('\n')
    lists: List[StructuredList] = []

    items: List[str] = []
    title = ''
    is_numbered = False
    in_list = False

    for index, line in enumerate(lines):
        item = _match_list_item(line)

        if item is not None:
            content, numbered = item
            if not in_list:
                title = _list_title(lines, index)
                is_numbered = numbered
                in_list = True
            items.append(content)
            continue

        if in_list:
            if items:
                lists.append(StructuredList(title=title, items=items, is_numbered=is_numbered))
            items = []
            title = ''
            in_list = False

    if in_list and items:
        lists.append(StructuredList(title=title, items=items, is_numbered=is_numbered))

    return lists


# =============================================================================
# NUMERIC DATA
# =============================================================================

def parse_number(raw: str) -> Optional[float]:
    """Parse '1,234.5' -> 1234.5; None when nothing numeric is left."""
    try:
        return float(raw.replace(',', ''))
    except ValueError:
        return None


def extract_numerical_data(text: str) -> List[NumericDatum]:
    """
    Extract "Label: 123" style lines.

    Separators may be ':', '=', '-', '–' or '—'; an optional percent or
    count/currency unit may follow the number. Labels must be 1-49
    characters after trimming.
    """
    data: List[NumericDatum] = []

    for line in text.split('\n'):
        match = NUMERIC_LINE_PATTERN.match(line)
        if not match:
            continue

        label = match.group(1).strip()
        value = parse_number(match.group(2))
        if value is None:
            continue
        if 0 < len(label) < MAX_LABEL_LENGTH:
            data.append(NumericDatum(label=label, value=value))

    return data
