"""
Pytest configuration and shared fixtures for notebridge tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture
def test_settings():
    """Settings with library defaults, ignoring any local .env file."""
    return Settings(_env_file=None)


# ============================================================================
# Fixtures: Sample notes
# ============================================================================

@pytest.fixture
def meeting_note() -> str:
    """A typical note with a table, lists, numbers and questions."""
    return """# Quarterly Review

Revenue grew steadily this quarter. The team shipped two major releases.

## Metrics

| Region | Sales |
|--------|-------|
| North | 120 |
| South | 95 |

- Revenue: 1,234.5
- Churn: 3%

## Next Steps

1. Hire two engineers
2. Launch the beta

## Questions

Which region should we expand to?
- North
- South
- West

Describe the biggest risk for next quarter.
"""


# ============================================================================
# Fixtures: API payloads
# ============================================================================

def _paragraph(*runs, style=None):
    paragraph = {"elements": [{"textRun": run} for run in runs]}
    if style:
        paragraph["paragraphStyle"] = {"namedStyleType": style}
    return {"paragraph": paragraph}


def _docs_cell(text):
    return {"content": [_paragraph({"content": text + "\n"})]}


@pytest.fixture
def document_payload() -> dict:
    return {
        "documentId": "doc-1",
        "title": "Project Plan",
        "body": {
            "content": [
                {"sectionBreak": {}},
                _paragraph({"content": "Overview\n"}, style="HEADING_1"),
                _paragraph(
                    {"content": "This is "},
                    {"content": "important ", "textStyle": {"bold": True}},
                    {"content": "stuff.\n"},
                ),
                _paragraph({"content": "\n"}),
                {
                    "table": {
                        "rows": 2,
                        "columns": 2,
                        "tableRows": [
                            {"tableCells": [_docs_cell("Task"), _docs_cell("Owner")]},
                            {"tableCells": [_docs_cell("Build|Test"), _docs_cell("Ann")]},
                        ],
                    }
                },
            ]
        },
    }


@pytest.fixture
def spreadsheet_payload() -> dict:
    return {
        "spreadsheetId": "sheet-1",
        "properties": {"title": "Budget"},
        "sheets": [
            {
                "properties": {"sheetId": 0, "title": "Costs"},
                "data": [
                    {
                        "rowData": [
                            {"values": [{"formattedValue": "Item"}, {"formattedValue": "Cost"}]},
                            {"values": [
                                {"userEnteredValue": {"stringValue": "Rent"}},
                                {"effectiveValue": {"numberValue": 1200}},
                            ]},
                            {"values": [{"userEnteredValue": {"boolValue": True}}]},
                        ]
                    }
                ],
            }
        ],
    }


def _text(content, **style):
    run = {"content": content}
    if style:
        run["style"] = style
    return {"textElements": [{"textRun": run}]}


@pytest.fixture
def presentation_payload() -> dict:
    return {
        "presentationId": "deck-1",
        "title": "Launch Plan",
        "slides": [
            {
                "objectId": "s1",
                "pageElements": [
                    {"objectId": "s1_title", "shape": {"shapeType": "TEXT_BOX", "text": _text("Goals\n")}},
                    {"objectId": "s1_body", "shape": {"shapeType": "TEXT_BOX", "text": _text("Grow users\nCut costs\n")}},
                ],
                "slideProperties": {
                    "notesPage": {
                        "objectId": "s1_notes_page",
                        "notesProperties": {"speakerNotesObjectId": "s1_notes"},
                        "pageElements": [
                            {"objectId": "s1_notes", "shape": {"text": _text("Keep it short\n")}},
                        ],
                    }
                },
            },
            {
                "objectId": "s2",
                "pageElements": [
                    {"objectId": "s2_title", "shape": {"text": _text("Numbers\n")}},
                    {
                        "objectId": "s2_table",
                        "table": {
                            "rows": 2,
                            "columns": 2,
                            "tableRows": [
                                {"tableCells": [{"text": _text("Q1\n")}, {"text": _text("Q2\n")}]},
                                {"tableCells": [{"text": _text("10\n")}, {"text": _text("20\n")}]},
                            ],
                        },
                    },
                    {"objectId": "s2_image", "image": {"contentUrl": "https://img.example/chart.png"}},
                ],
            },
            {"objectId": "s3", "pageElements": []},
        ],
    }


@pytest.fixture
def form_payload() -> dict:
    return {
        "formId": "form-1",
        "info": {"title": "Team Survey", "description": "Tell us how it went"},
        "responderUri": "https://forms.example/r/1",
        "items": [
            {
                "itemId": "i1",
                "title": "Your name",
                "questionItem": {"question": {"questionId": "q1", "required": True, "textQuestion": {}}},
            },
            {
                "itemId": "i2",
                "title": "Favorite color",
                "questionItem": {
                    "question": {
                        "questionId": "q2",
                        "choiceQuestion": {
                            "type": "RADIO",
                            "options": [{"value": "Red"}, {"value": "Blue"}],
                        },
                    }
                },
            },
            {"itemId": "i3", "title": "Part two", "pageBreakItem": {}},
            {
                "itemId": "i4",
                "title": "Satisfaction",
                "questionItem": {
                    "question": {
                        "questionId": "q3",
                        "scaleQuestion": {"low": 1, "high": 5, "highLabel": "Great"},
                    }
                },
            },
        ],
    }


@pytest.fixture
def form_responses() -> list:
    return [
        {
            "responseId": "r1",
            "lastSubmittedTime": "2024-03-01T09:15:00Z",
            "answers": {
                "q1": {"questionId": "q1", "textAnswers": {"answers": [{"value": "Ann"}]}},
                "q2": {"questionId": "q2", "textAnswers": {"answers": [{"value": "Red"}]}},
            },
        },
        {
            "responseId": "r2",
            "lastSubmittedTime": "2024-03-02T10:00:00Z",
            "answers": {
                "q1": {"questionId": "q1", "textAnswers": {"answers": [{"value": "Bob|Jr"}]}},
                "q2": {"questionId": "q2", "textAnswers": {"answers": [{"value": "Red"}]}},
                "q3": {"questionId": "q3", "textAnswers": {"answers": [{"value": "4"}]}},
            },
        },
    ]
