"""
Unit tests for notebridge/converters/forms_converter.py
"""
import pytest
from notebridge.analysis.models import DetectedQuestion
from notebridge.converters import QUESTION_TYPE_MAP, FormsConverter
from notebridge.converters.forms_converter import format_timestamp
from notebridge.exceptions import InvalidDocumentError
from notebridge.workspace.forms import Question


def _choice_form(options, question_id="q"):
    return {
        "info": {"title": "Poll"},
        "items": [{
            "title": "Pick",
            "questionItem": {"question": {
                "questionId": question_id,
                "choiceQuestion": {"type": "RADIO", "options": [{"value": o} for o in options]},
            }},
        }],
    }


def _answers(question_id, values):
    return [
        {"answers": {question_id: {"textAnswers": {"answers": [{"value": value}]}}}}
        for value in values
    ]


class TestToMarkdown:

    def test_header_and_items(self, form_payload):
        markdown = FormsConverter.to_markdown(form_payload)

        assert markdown.startswith(
            "# Team Survey\n\n*Tell us how it went*\n\n[Open Form](https://forms.example/r/1)\n\n---\n\n## Questions\n\n"
        )
        assert "### 1. Your name **(Required)**\nType: Short Answer\n" in markdown
        assert (
            "### 2. Favorite color\nType: Multiple Choice\n\nOptions:\n- [ ] Red\n- [ ] Blue\n"
        ) in markdown
        assert "---\n## Part two\n" in markdown
        assert "### 4. Satisfaction\nType: Scale (1 - Great)\n" in markdown

    def test_minimal_form(self):
        assert FormsConverter.to_markdown({"info": {"title": "Blank"}}) == "# Blank\n\n---\n\n## Questions\n"

    def test_other_items(self):
        form = {
            "info": {"title": "F"},
            "items": [
                {"title": "Grid", "questionGroupItem": {"questions": [
                    {"choiceQuestion": {"type": "CHECKBOX"}},
                    {"choiceQuestion": {"type": "GRID_THING"}},
                ]}},
                {"title": "Heads up", "description": "Read this", "textItem": {}},
                {"imageItem": {"image": {"sourceUri": "https://img/x.png"}}},
                {"videoItem": {"video": {"youtubeUri": "https://yt/v"}, "caption": "Watch"}},
                {"title": "Nothing to render", "textItem": None},
            ],
        }
        markdown = FormsConverter.to_markdown(form)

        assert "### 1. Grid\n- Checkboxes\n- Choice\n" in markdown
        assert "**Heads up**\nRead this\n" in markdown
        assert "![Image](https://img/x.png)\n" in markdown
        assert "[Video](https://yt/v)\n*Watch*\n" in markdown
        assert "Nothing to render" not in markdown

    @pytest.mark.parametrize("payload,label,options", [
        ({"textQuestion": {"paragraph": True}}, "Long Answer", []),
        ({"choiceQuestion": {"type": "DROP_DOWN", "options": [{"value": "a"}, {"isOther": True}]}},
         "Dropdown", ["a", "Other..."]),
        ({"scaleQuestion": {"low": 0, "high": 10}}, "Scale (0 - 10)", []),
        ({"dateQuestion": {"includeTime": True}}, "Date + Time", []),
        ({"dateQuestion": {}}, "Date", []),
        ({"timeQuestion": {"duration": True}}, "Duration", []),
        ({"timeQuestion": {}}, "Time", []),
        ({"fileUploadQuestion": {"types": ["PDF", "IMAGE"]}}, "File Upload", ["PDF", "IMAGE"]),
        ({}, "Unknown", []),
    ])
    def test_question_type_info(self, payload, label, options):
        assert FormsConverter.question_type_info(Question.model_validate(payload)) == (label, options)

    def test_wrong_types_raise(self):
        with pytest.raises(InvalidDocumentError):
            FormsConverter.to_markdown({"info": {"title": "F"}, "items": {"not": "a list"}})


class TestResponses:

    def test_table(self, form_payload, form_responses):
        markdown = FormsConverter.responses_to_markdown(form_payload, form_responses)

        assert markdown == (
            "# Responses: Team Survey\n"
            "\n"
            "Total responses: 2\n"
            "\n"
            "| Timestamp | Your name | Favorite color | Satisfaction |\n"
            "| --- | --- | --- | --- |\n"
            "| 2024-03-01 09:15:00 | Ann | Red |  |\n"
            "| 2024-03-02 10:00:00 | Bob\\|Jr | Red | 4 |"
        )

    def test_no_responses(self, form_payload):
        assert FormsConverter.responses_to_markdown(form_payload, []).endswith("*No responses yet*")

    def test_file_uploads_and_newlines(self):
        form = {"info": {"title": "F"}, "items": [
            {"title": "Files", "questionItem": {"question": {"questionId": "f"}}},
            {"title": "Text", "questionItem": {"question": {"questionId": "t"}}},
        ]}
        responses = [{"answers": {
            "f": {"fileUploadAnswers": {"answers": [{"fileName": "a.pdf"}, {"fileName": "b.png"}]}},
            "t": {"textAnswers": {"answers": [{"value": "line1\nline2"}, {"value": "x"}]}},
        }}]
        markdown = FormsConverter.responses_to_markdown(form, responses)
        assert markdown.endswith("|  | a.pdf, b.png | line1 line2, x |")

    def test_questions_without_ids_keep_their_columns(self):
        form = {"info": {"title": "F"}, "items": [
            {"title": "First", "questionItem": {"question": {}}},
            {"title": "Second", "questionItem": {"question": {}}},
            {"title": "Third", "questionItem": {"question": {"questionId": "q3"}}},
        ]}
        responses = [{"answers": {"q3": {"textAnswers": {"answers": [{"value": "yes"}]}}}}]
        lines = FormsConverter.responses_to_markdown(form, responses).split("\n")

        assert lines[4] == "| Timestamp | First | Second | Third |"
        assert lines[5] == "| --- | --- | --- | --- |"
        assert lines[6] == "|  |  |  | yes |"

    @pytest.mark.parametrize("raw,expected", [
        ("2024-03-01T09:15:00Z", "2024-03-01 09:15:00"),
        ("2024-03-01T09:15:00.123+00:00", "2024-03-01 09:15:00"),
        ("yesterday", "yesterday"),
        (None, ""),
    ])
    def test_format_timestamp(self, raw, expected):
        assert format_timestamp(raw) == expected


class TestSummary:

    def test_summary(self, form_payload, form_responses):
        summary = FormsConverter.generate_summary(form_payload, form_responses)

        assert summary.startswith(
            "# Form Summary: Team Survey\n\n- Total Questions: 3\n- Total Responses: 2\n\n## Response Summary\n"
        )
        assert '### Your name\n\nResponses: 2\n- "Ann"\n- "Bob|Jr"\n' in summary
        assert "### Favorite color\n\n- Red: 2 (100%)\n- Blue: 0 (0%)\n" in summary
        assert '### Satisfaction\n\nResponses: 1\n- "4"\n' in summary

    def test_no_responses_stops_after_totals(self, form_payload):
        summary = FormsConverter.generate_summary(form_payload, [])
        assert summary == "# Form Summary: Team Survey\n\n- Total Questions: 3\n- Total Responses: 0\n"

    def test_percentages_round_half_up(self):
        responses = _answers("q", ["A"] + ["B"] * 7)
        summary = FormsConverter.generate_summary(_choice_form(["A", "B"]), responses)

        assert "- A: 1 (13%)" in summary
        assert "- B: 7 (88%)" in summary

    def test_unlisted_answers_counted(self):
        summary = FormsConverter.generate_summary(_choice_form(["A"]), _answers("q", ["A", "Z", "Z"]))

        assert "- A: 1 (33%)" in summary
        assert "- Z: 2 (67%)" in summary

    def test_many_free_text_answers_truncated(self):
        form = {"info": {"title": "F"}, "items": [
            {"title": "Why", "questionItem": {"question": {"questionId": "w", "textQuestion": {}}}},
        ]}
        summary = FormsConverter.generate_summary(form, _answers("w", [f"a{i}" for i in range(7)] + ["a0"]))

        assert 'Responses: 8\n- "a0"\n- "a1"\n- ... and 5 more' in summary


class TestCreateItemRequests:

    QUESTIONS = [
        DetectedQuestion(text="What is 2+2?", type="multiple_choice", options=["3", "4"], correct_answer="4"),
        DetectedQuestion(text="Describe it", type="paragraph", required=False),
    ]

    def test_quiz_requests(self):
        requests = FormsConverter.build_create_item_requests(self.QUESTIONS, quiz=True)

        assert requests == [
            {"createItem": {
                "item": {
                    "title": "What is 2+2?",
                    "questionItem": {"question": {
                        "required": True,
                        "grading": {"pointValue": 1, "correctAnswers": {"answers": [{"value": "4"}]}},
                        "choiceQuestion": {"type": "RADIO", "options": [{"value": "3"}, {"value": "4"}]},
                    }},
                },
                "location": {"index": 0},
            }},
            {"createItem": {
                "item": {
                    "title": "Describe it",
                    "questionItem": {"question": {"required": False, "textQuestion": {"paragraph": True}}},
                },
                "location": {"index": 1},
            }},
        ]

    def test_no_grading_outside_quiz(self):
        item = FormsConverter.detected_question_to_item(self.QUESTIONS[0])
        assert item.question_item.question.grading is None

    def test_explicit_points(self):
        question = DetectedQuestion(text="Q", type="short_answer", correct_answer="x", points=3)
        item = FormsConverter.detected_question_to_item(question, quiz=True)
        assert item.question_item.question.grading.point_value == 3

    def test_scale_mapping(self):
        item = FormsConverter.detected_question_to_item(DetectedQuestion(text="Rate 1-5", type="scale"))
        assert item.to_api()["questionItem"]["question"]["scaleQuestion"] == {"low": 1, "high": 5}

    def test_every_detected_type_is_mapped(self):
        assert set(QUESTION_TYPE_MAP) == {
            "multiple_choice", "checkbox", "short_answer", "paragraph", "scale", "dropdown",
        }
