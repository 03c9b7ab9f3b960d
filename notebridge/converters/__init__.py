"""
Converters between workspace documents and Markdown.
"""

from .edit_requests import (
    DocumentCursor,
    EditOperation,
    InsertText,
    UpdateParagraphStyle,
    UpdateTextStyle,
    utf16_len,
)
from .docs_converter import DocsConverter
from .sheets_converter import SheetsConverter
from .slides_converter import ParsedSlide, SlidesConverter
from .forms_converter import QUESTION_TYPE_MAP, FormsConverter

__all__ = [
    "DocumentCursor",
    "EditOperation",
    "InsertText",
    "UpdateParagraphStyle",
    "UpdateTextStyle",
    "utf16_len",
    "DocsConverter",
    "SheetsConverter",
    "ParsedSlide",
    "SlidesConverter",
    "QUESTION_TYPE_MAP",
    "FormsConverter",
]
