#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
notebridge - Markdown notes to and from Docs, Sheets, Slides and Forms.

Two halves:

- analysis: read a Markdown note and propose a document, a spreadsheet, a
  slide deck and a form for it
- converters: render workspace documents as Markdown, and turn Markdown
  back into grids, slides and document edit operations
"""

__version__ = "1.0.0"

from .analysis import NoteAnalyzer, NoteAnalysis, analyze_note
from .converters import DocsConverter, FormsConverter, SheetsConverter, SlidesConverter
from .exceptions import InvalidDocumentError, NotebridgeError

__all__ = [
    "__version__",
    "NoteAnalyzer",
    "NoteAnalysis",
    "analyze_note",
    "DocsConverter",
    "FormsConverter",
    "SheetsConverter",
    "SlidesConverter",
    "InvalidDocumentError",
    "NotebridgeError",
]
