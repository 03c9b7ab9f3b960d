#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document edit operations.

Typed counterparts of the Docs batchUpdate requests produced when Markdown
is written into a document. `to_request()` gives the wire dict.

Indices count UTF-16 code units, as the Docs API does, so a character outside
the Basic Multilingual Plane (most emoji) takes two positions.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union


def utf16_len(text: str) -> int:
    """Length of `text` in UTF-16 code units."""
    return len(text.encode("utf-16-le")) // 2


@dataclass(frozen=True)
class InsertText:
    index: int
    text: str

    @property
    def end_index(self) -> int:
        return self.index + utf16_len(self.text)

    def to_request(self) -> Dict[str, Any]:
        return {
            "insertText": {
                "location": {"index": self.index},
                "text": self.text,
            }
        }


@dataclass(frozen=True)
class UpdateParagraphStyle:
    start_index: int
    end_index: int
    named_style_type: str

    def to_request(self) -> Dict[str, Any]:
        return {
            "updateParagraphStyle": {
                "range": {"startIndex": self.start_index, "endIndex": self.end_index},
                "paragraphStyle": {"namedStyleType": self.named_style_type},
                "fields": "namedStyleType",
            }
        }


@dataclass(frozen=True)
class UpdateTextStyle:
    """Bold or italic over [start_index, end_index)."""
    start_index: int
    end_index: int
    bold: bool = False
    italic: bool = False

    @property
    def fields(self) -> str:
        names = []
        if self.bold:
            names.append("bold")
        if self.italic:
            names.append("italic")
        return ",".join(names)

    def to_request(self) -> Dict[str, Any]:
        style: Dict[str, bool] = {}
        if self.bold:
            style["bold"] = True
        if self.italic:
            style["italic"] = True
        return {
            "updateTextStyle": {
                "range": {"startIndex": self.start_index, "endIndex": self.end_index},
                "textStyle": style,
                "fields": self.fields,
            }
        }


EditOperation = Union[InsertText, UpdateParagraphStyle, UpdateTextStyle]


class DocumentCursor:
    """
    Running insertion index.

    Index 1 is the first position after the document's initial newline.
    """

    def __init__(self, index: int = 1):
        self.index = index

    def insert(self, text: str) -> InsertText:
        """Create an insert at the cursor and move past it."""
        operation = InsertText(index=self.index, text=text)
        self.index += utf16_len(text)
        return operation

    def __repr__(self) -> str:
        return f"DocumentCursor(index={self.index})"
