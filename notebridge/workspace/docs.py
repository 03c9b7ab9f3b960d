"""
Document models - rich-text documents as returned by the Docs API.
"""

from typing import List, Optional

from pydantic import Field

from .base import WorkspaceModel


class Link(WorkspaceModel):
    url: Optional[str] = None


class TextStyle(WorkspaceModel):
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None
    strikethrough: Optional[bool] = None
    link: Optional[Link] = None


class TextRun(WorkspaceModel):
    content: str = ""
    text_style: Optional[TextStyle] = None


class ParagraphElement(WorkspaceModel):
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    text_run: Optional[TextRun] = None


class ParagraphStyle(WorkspaceModel):
    named_style_type: Optional[str] = None
    heading_id: Optional[str] = None


class Paragraph(WorkspaceModel):
    elements: List[ParagraphElement] = Field(default_factory=list)
    paragraph_style: Optional[ParagraphStyle] = None


class TableCell(WorkspaceModel):
    content: List["StructuralElement"] = Field(default_factory=list)


class TableRow(WorkspaceModel):
    table_cells: List[TableCell] = Field(default_factory=list)


class Table(WorkspaceModel):
    rows: int = 0
    columns: int = 0
    table_rows: List[TableRow] = Field(default_factory=list)


class StructuralElement(WorkspaceModel):
    """One block of the document body: a paragraph, a table or a break."""
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    paragraph: Optional[Paragraph] = None
    table: Optional[Table] = None


class Body(WorkspaceModel):
    content: List[StructuralElement] = Field(default_factory=list)


class Document(WorkspaceModel):
    document_id: str = ""
    title: str = ""
    body: Optional[Body] = None


TableCell.model_rebuild()
