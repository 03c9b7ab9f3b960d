#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Forms Converter - forms and responses to Markdown, detected questions to
form items.
"""

from collections import Counter
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from ..analysis.models import DetectedQuestion
from ..workspace import load_model
from ..workspace.forms import (
    CorrectAnswer,
    CorrectAnswers,
    Form,
    FormResponse,
    Grading,
    Item,
    Question,
    QuestionItem,
)
from config.logging_config import get_logger
from config.settings import get_settings

logger = get_logger(__name__)

FormLike = Union[Form, Dict[str, Any]]
ResponseLike = Union[FormResponse, Dict[str, Any]]

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

CHOICE_TYPE_LABELS = {
    'RADIO': 'Multiple Choice',
    'CHECKBOX': 'Checkboxes',
    'DROP_DOWN': 'Dropdown',
}

# Detected question type -> question payload of the Forms API
QUESTION_TYPE_MAP: Dict[str, Dict[str, Any]] = {
    'multiple_choice': {'choiceQuestion': {'type': 'RADIO'}},
    'checkbox': {'choiceQuestion': {'type': 'CHECKBOX'}},
    'dropdown': {'choiceQuestion': {'type': 'DROP_DOWN'}},
    'short_answer': {'textQuestion': {'paragraph': False}},
    'paragraph': {'textQuestion': {'paragraph': True}},
    'scale': {'scaleQuestion': {'low': 1, 'high': 5}},
}


def format_timestamp(value: Optional[str]) -> str:
    """RFC 3339 timestamp as 'YYYY-MM-DD HH:MM:SS'; unparsable values pass through."""
    if not value:
        return ''
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return value
    return parsed.strftime(TIMESTAMP_FORMAT)


def _percent(count: int, total: int) -> int:
    # Half rounds up
    return int(count * 100 / total + 0.5) if total else 0


class FormsConverter:
    """
    Usage:
        markdown = FormsConverter.to_markdown(form_json)
        table = FormsConverter.responses_to_markdown(form_json, responses_json)
    """

    # -------------------------------------------------------------------------
    # Form -> Markdown
    # -------------------------------------------------------------------------

    @classmethod
    def to_markdown(cls, form: FormLike) -> str:
        """
        Render a form and its items as Markdown.

        Raises:
            InvalidDocumentError: payload cannot be read as a form
        """
        form = load_model(Form, form)
        lines = [f"# {form.info.title}", ""]

        if form.info.description:
            lines.append(f"*{form.info.description}*")
            lines.append("")
        if form.responder_uri:
            lines.append(f"[Open Form]({form.responder_uri})")
            lines.append("")

        lines.extend(["---", "", "## Questions", ""])

        number = 1
        for item in form.items:
            item_md = cls._convert_item(item, number)
            if item_md:
                lines.append(item_md)
                lines.append("")
                number += 1

        logger.debug("Converted form '%s' (%d items)", form.info.title, len(form.items))
        return '\n'.join(lines)

    @classmethod
    def _convert_item(cls, item: Item, number: int) -> str:
        lines = []

        if item.question_item is not None:
            question = item.question_item.question or Question()
            required = ' **(Required)**' if question.required else ''
            lines.append(f"### {number}. {item.title or 'Untitled Question'}{required}")
            if item.description:
                lines.append(f"*{item.description}*")

            label, options = cls.question_type_info(question)
            lines.append(f"Type: {label}")
            lines.append("")
            if options:
                lines.append("Options:")
                lines.extend(f"- [ ] {option}" for option in options)

        elif item.question_group_item is not None:
            lines.append(f"### {number}. {item.title or 'Question Group'}")
            if item.description:
                lines.append(f"*{item.description}*")
            for question in item.question_group_item.questions:
                label, _ = cls.question_type_info(question)
                lines.append(f"- {label}")

        elif item.text_item is not None:
            if item.title:
                lines.append(f"**{item.title}**")
            if item.description:
                lines.append(item.description)

        elif item.page_break_item is not None:
            lines.append("---")
            if item.title:
                lines.append(f"## {item.title}")

        elif item.image_item is not None:
            image = item.image_item.image
            lines.append(f"![{image.alt_text or 'Image'}]({image.content_uri or image.source_uri or ''})")

        elif item.video_item is not None:
            if item.video_item.video.youtube_uri:
                lines.append(f"[Video]({item.video_item.video.youtube_uri})")
            if item.video_item.caption:
                lines.append(f"*{item.video_item.caption}*")

        return '\n'.join(lines)

    @staticmethod
    def question_type_info(question: Question):
        """Return (type label, listed options) for a question."""
        if question.text_question is not None:
            return ('Long Answer' if question.text_question.paragraph else 'Short Answer'), []

        if question.choice_question is not None:
            choice = question.choice_question
            options = ['Other...' if option.is_other else option.value for option in choice.options]
            return CHOICE_TYPE_LABELS.get(choice.type, 'Choice'), options

        if question.scale_question is not None:
            scale = question.scale_question
            low = scale.low_label or str(scale.low)
            high = scale.high_label or str(scale.high)
            return f"Scale ({low} - {high})", []

        if question.date_question is not None:
            return ('Date + Time' if question.date_question.include_time else 'Date'), []

        if question.time_question is not None:
            return ('Duration' if question.time_question.duration else 'Time'), []

        if question.file_upload_question is not None:
            return 'File Upload', list(question.file_upload_question.types)

        return 'Unknown', []

    # -------------------------------------------------------------------------
    # Responses
    # -------------------------------------------------------------------------

    @staticmethod
    def _question_titles(form: Form) -> List[Tuple[Optional[str], str]]:
        """(question id, item title) per single-question item, in form order."""
        titles: List[Tuple[Optional[str], str]] = []
        for item in form.items:
            if item.question_item is not None and item.question_item.question is not None:
                titles.append((item.question_item.question.question_id, item.title or 'Untitled'))
        return titles

    @classmethod
    def responses_to_markdown(cls, form: FormLike, responses: Sequence[ResponseLike]) -> str:
        """
        One table row per response: timestamp, then one column per question.

        Raises:
            InvalidDocumentError: form or a response has the wrong shape
        """
        form = load_model(Form, form)
        responses = [load_model(FormResponse, response) for response in responses]

        lines = [f"# Responses: {form.info.title}", "", f"Total responses: {len(responses)}", ""]
        if not responses:
            lines.append("*No responses yet*")
            return '\n'.join(lines)

        titles = cls._question_titles(form)
        headers = ['Timestamp'] + [title.replace('|', '\\|') for _, title in titles]
        lines.append(f"| {' | '.join(headers)} |")
        lines.append(f"| {' | '.join(['---'] * len(headers))} |")

        for response in responses:
            row = [format_timestamp(response.last_submitted_time or response.create_time)]
            for question_id, _ in titles:
                answer = response.answers.get(question_id) if question_id is not None else None
                if answer is not None and answer.text_answers is not None:
                    text = ', '.join(a.value for a in answer.text_answers.answers)
                    row.append(text.replace('|', '\\|').replace('\n', ' '))
                elif answer is not None and answer.file_upload_answers is not None:
                    row.append(', '.join(a.file_name for a in answer.file_upload_answers.answers))
                else:
                    row.append('')
            lines.append(f"| {' | '.join(row)} |")

        logger.debug("Tabulated %d responses for '%s'", len(responses), form.info.title)
        return '\n'.join(lines)

    @classmethod
    def generate_summary(cls, form: FormLike, responses: Sequence[ResponseLike]) -> str:
        """
        Per-question response statistics.

        Choice questions list every option with its count and share of all
        responses; other questions show a few distinct answers.
        """
        form = load_model(Form, form)
        responses = [load_model(FormResponse, response) for response in responses]
        sample_size = get_settings().summary_sample_answers

        question_items = [item for item in form.items if item.question_item is not None]
        lines = [
            f"# Form Summary: {form.info.title}",
            "",
            f"- Total Questions: {len(question_items)}",
            f"- Total Responses: {len(responses)}",
            "",
        ]
        if not responses:
            return '\n'.join(lines)

        lines.extend(["## Response Summary", ""])

        for item in question_items:
            question = item.question_item.question or Question()
            lines.append(f"### {item.title or 'Untitled'}")
            lines.append("")

            answers: List[str] = []
            for response in responses:
                answer = response.answers.get(question.question_id) if question.question_id else None
                if answer is not None and answer.text_answers is not None:
                    answers.extend(a.value for a in answer.text_answers.answers)

            if question.choice_question is not None:
                counts = Counter({option.value: 0 for option in question.choice_question.options})
                counts.update(answers)
                for option, count in counts.items():
                    lines.append(f"- {option}: {count} ({_percent(count, len(responses))}%)")
            else:
                unique = list(dict.fromkeys(answers))
                lines.append(f"Responses: {len(answers)}")
                if len(unique) <= sample_size:
                    lines.extend(f'- "{answer}"' for answer in unique)
                else:
                    lines.append(f'- "{unique[0]}"')
                    lines.append(f'- "{unique[1]}"')
                    lines.append(f"- ... and {len(unique) - 2} more")

            lines.append("")

        return '\n'.join(lines)

    # -------------------------------------------------------------------------
    # Detected questions -> form items
    # -------------------------------------------------------------------------

    @staticmethod
    def detected_question_to_item(question: DetectedQuestion, quiz: bool = False) -> Item:
        """
        Build a form item for a detected question.

        With quiz=True and a known correct answer, the question is graded
        with `points` (or the configured default) points.
        """
        payload = dict(QUESTION_TYPE_MAP.get(question.type, QUESTION_TYPE_MAP['short_answer']))
        if 'choiceQuestion' in payload:
            payload['choiceQuestion'] = {
                **payload['choiceQuestion'],
                'options': [{'value': option} for option in question.options],
            }
        payload['required'] = question.required

        model = Question.model_validate(payload)
        if quiz and question.correct_answer is not None:
            model.grading = Grading(
                point_value=question.points or get_settings().default_question_points,
                correct_answers=CorrectAnswers(answers=[CorrectAnswer(value=question.correct_answer)]),
            )

        return Item(title=question.text, question_item=QuestionItem(question=model))

    @classmethod
    def build_create_item_requests(
        cls,
        questions: Sequence[DetectedQuestion],
        quiz: bool = False,
    ) -> List[Dict[str, Any]]:
        """createItem batchUpdate requests, one per question, in order."""
        requests = [
            {
                'createItem': {
                    'item': cls.detected_question_to_item(question, quiz=quiz).to_api(),
                    'location': {'index': index},
                }
            }
            for index, question in enumerate(questions)
        ]
        logger.debug("Built %d createItem requests (quiz=%s)", len(requests), quiz)
        return requests
