"""
Presentation models - decks as returned by the Slides API.

Speaker notes are not a field of the slide itself: they live on the notes
page (`slide_properties.notes_page`), inside the shape whose object id is
`notes_properties.speaker_notes_object_id`.
"""

from typing import List, Optional

from pydantic import Field

from .base import WorkspaceModel


class TextStyle(WorkspaceModel):
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None


class TextRun(WorkspaceModel):
    content: str = ""
    style: Optional[TextStyle] = None


class TextElement(WorkspaceModel):
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    text_run: Optional[TextRun] = None


class TextContent(WorkspaceModel):
    text_elements: List[TextElement] = Field(default_factory=list)


class Shape(WorkspaceModel):
    shape_type: Optional[str] = None
    text: Optional[TextContent] = None


class Image(WorkspaceModel):
    content_url: Optional[str] = None
    source_url: Optional[str] = None


class TableCell(WorkspaceModel):
    text: Optional[TextContent] = None


class TableRow(WorkspaceModel):
    table_cells: List[TableCell] = Field(default_factory=list)


class Table(WorkspaceModel):
    rows: int = 0
    columns: int = 0
    table_rows: List[TableRow] = Field(default_factory=list)


class PageElement(WorkspaceModel):
    object_id: Optional[str] = None
    shape: Optional[Shape] = None
    image: Optional[Image] = None
    table: Optional[Table] = None


class NotesProperties(WorkspaceModel):
    speaker_notes_object_id: Optional[str] = None


class SlideProperties(WorkspaceModel):
    layout_object_id: Optional[str] = None
    master_object_id: Optional[str] = None
    notes_page: Optional["Page"] = None


class Page(WorkspaceModel):
    """A slide, or the notes page attached to one."""
    object_id: Optional[str] = None
    page_elements: List[PageElement] = Field(default_factory=list)
    slide_properties: Optional[SlideProperties] = None
    notes_properties: Optional[NotesProperties] = None


class Presentation(WorkspaceModel):
    presentation_id: str = ""
    title: str = ""
    slides: List[Page] = Field(default_factory=list)


SlideProperties.model_rebuild()
