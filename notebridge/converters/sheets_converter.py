#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Sheets Converter - spreadsheets and string grids to / from pipe tables.
"""

import math
import re
from typing import Any, Dict, List, Optional, Union

from ..analysis.models import SheetsAnalysis
from ..workspace import load_model
from ..workspace.sheets import CellData, RowData, Spreadsheet
from config.logging_config import get_logger

logger = get_logger(__name__)

SpreadsheetLike = Union[Spreadsheet, Dict[str, Any]]
Grid = List[List[str]]

# A pipe not preceded by a backslash
CELL_SPLIT_PATTERN = re.compile(r'(?<!\\)\|')
SEPARATOR_CELL_PATTERN = re.compile(r'^:?-+:?$')


def format_number(value: float) -> str:
    """Integral values print without a trailing '.0'."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


def escape_cell(value: str) -> str:
    return value.replace('|', '\\|')


def _split_row(line: str) -> List[str]:
    return [cell.strip().replace('\\|', '|') for cell in CELL_SPLIT_PATTERN.split(line[1:-1])]


def _is_separator(line: str) -> bool:
    cells = [cell.strip() for cell in CELL_SPLIT_PATTERN.split(line[1:-1])]
    return all(SEPARATOR_CELL_PATTERN.match(cell) for cell in cells)


def _is_row(line: str) -> bool:
    return len(line) >= 2 and line.startswith('|') and line.endswith('|')


class SheetsConverter:
    """
    Usage:
        markdown = SheetsConverter.to_markdown(spreadsheet_json)
        grid = SheetsConverter.markdown_table_to_array(markdown)
    """

    # -------------------------------------------------------------------------
    # Spreadsheet -> Markdown
    # -------------------------------------------------------------------------

    @classmethod
    def to_markdown(cls, spreadsheet: SpreadsheetLike) -> str:
        """
        Render every sheet as a pipe table built from its first grid.

        Raises:
            InvalidDocumentError: payload cannot be read as a spreadsheet
        """
        book = load_model(Spreadsheet, spreadsheet)
        lines = [f"# {book.properties.title}", ""]
        multiple = len(book.sheets) > 1

        for sheet in book.sheets:
            if multiple:
                lines.append(f"## {sheet.properties.title}")
                lines.append("")

            if sheet.data and sheet.data[0].row_data:
                lines.extend(cls._row_data_to_table(sheet.data[0].row_data))
                lines.append("")

        logger.debug("Converted spreadsheet '%s' (%d sheets)", book.properties.title, len(book.sheets))
        return '\n'.join(lines)

    @staticmethod
    def cell_value(cell: Optional[CellData]) -> str:
        """
        Display string of a cell.

        formattedValue wins, then effectiveValue, then userEnteredValue;
        within a value string > number > boolean.
        """
        if cell is None:
            return ''
        if cell.formatted_value:
            return cell.formatted_value

        value = cell.effective_value if cell.effective_value is not None else cell.user_entered_value
        if value is None:
            return ''
        if value.string_value is not None:
            return value.string_value
        if value.number_value is not None:
            return format_number(value.number_value)
        if value.bool_value is not None:
            return 'TRUE' if value.bool_value else 'FALSE'
        return ''

    @classmethod
    def _row_data_to_table(cls, row_data: List[RowData]) -> List[str]:
        width = max(len(row.values) for row in row_data)
        if width == 0:
            return []

        grid = []
        for row in row_data:
            cells = [cls.cell_value(cell) for cell in row.values]
            grid.append(cells + [''] * (width - len(cells)))
        return cls.array_to_markdown_table(grid).split('\n')

    # -------------------------------------------------------------------------
    # Grids <-> Markdown
    # -------------------------------------------------------------------------

    @staticmethod
    def array_to_markdown_table(grid: Grid) -> str:
        """
        Render a grid; the first row becomes the header.

        Short rows are padded with empty cells, pipes are escaped.
        """
        if not grid:
            return ''

        width = max(len(row) for row in grid)
        lines = []
        for index, row in enumerate(grid):
            cells = [escape_cell(row[j] or '') if j < len(row) else '' for j in range(width)]
            lines.append(f"| {' | '.join(cells)} |")
            if index == 0:
                lines.append(f"| {' | '.join(['---'] * width)} |")
        return '\n'.join(lines)

    @classmethod
    def create_table(cls, headers: List[str], rows: Grid) -> str:
        return cls.array_to_markdown_table([headers, *rows])

    @staticmethod
    def extract_tables(markdown: str) -> List[Grid]:
        """
        Every pipe table in the text as a grid.

        Separator rows are skipped; any non-table line ends a table.
        """
        tables: List[Grid] = []
        current: Grid = []

        for line in markdown.split('\n'):
            line = line.strip()
            if _is_row(line):
                if not _is_separator(line):
                    current.append(_split_row(line))
            elif current:
                tables.append(current)
                current = []

        if current:
            tables.append(current)
        return tables

    @staticmethod
    def markdown_table_to_array(markdown: str) -> Grid:
        """Rows of a single pipe table; non-table lines are ignored."""
        grid: Grid = []
        for line in markdown.split('\n'):
            line = line.strip()
            if not _is_row(line) or _is_separator(line):
                continue
            grid.append(_split_row(line))
        return grid

    # -------------------------------------------------------------------------
    # Analysis -> grid
    # -------------------------------------------------------------------------

    @staticmethod
    def analysis_to_grid(analysis: SheetsAnalysis, table_index: int = 0) -> Grid:
        """
        Grid to write into a new spreadsheet.

        The chosen table wins; otherwise every list is stacked as a
        one-column block under its title.
        """
        if 0 <= table_index < len(analysis.tables):
            table = analysis.tables[table_index]
            return [list(table.headers), *(list(row) for row in table.rows)]

        grid: Grid = []
        for structured_list in analysis.lists:
            grid.append([structured_list.title or 'Item'])
            grid.extend([item] for item in structured_list.items)
        return grid
