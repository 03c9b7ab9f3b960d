"""
Spreadsheet models - grids as returned by the Sheets API (includeGridData).
"""

from typing import List, Optional

from pydantic import Field

from .base import WorkspaceModel


class ExtendedValue(WorkspaceModel):
    string_value: Optional[str] = None
    number_value: Optional[float] = None
    bool_value: Optional[bool] = None
    formula_value: Optional[str] = None


class CellData(WorkspaceModel):
    user_entered_value: Optional[ExtendedValue] = None
    effective_value: Optional[ExtendedValue] = None
    formatted_value: Optional[str] = None


class RowData(WorkspaceModel):
    values: List[CellData] = Field(default_factory=list)


class GridData(WorkspaceModel):
    start_row: Optional[int] = None
    start_column: Optional[int] = None
    row_data: List[RowData] = Field(default_factory=list)


class GridProperties(WorkspaceModel):
    row_count: Optional[int] = None
    column_count: Optional[int] = None


class SheetProperties(WorkspaceModel):
    sheet_id: Optional[int] = None
    title: str = ""
    grid_properties: Optional[GridProperties] = None


class Sheet(WorkspaceModel):
    properties: SheetProperties = Field(default_factory=SheetProperties)
    data: List[GridData] = Field(default_factory=list)


class SpreadsheetProperties(WorkspaceModel):
    title: str = ""


class Spreadsheet(WorkspaceModel):
    spreadsheet_id: str = ""
    properties: SpreadsheetProperties = Field(default_factory=SpreadsheetProperties)
    sheets: List[Sheet] = Field(default_factory=list)
