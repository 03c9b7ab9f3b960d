"""
Workspace document models.

Typed views of the JSON returned by the Docs, Sheets, Slides and Forms APIs.
Per-service models live in their own modules since names such as `Table`
mean different things in each API.
"""

from . import docs, forms, sheets, slides
from .base import WorkspaceModel, load_model
from .docs import Document
from .forms import Form, FormResponse
from .sheets import Spreadsheet
from .slides import Presentation

__all__ = [
    "docs",
    "forms",
    "sheets",
    "slides",
    "WorkspaceModel",
    "load_model",
    "Document",
    "Form",
    "FormResponse",
    "Spreadsheet",
    "Presentation",
]
