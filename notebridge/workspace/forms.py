"""
Form models - forms and their responses as returned by the Forms API.

An item carries exactly one kind payload (question, group, text, page
break, image or video). Some kinds arrive as empty objects (`{}`), so
callers test them with `is not None`.
"""

from typing import Dict, List, Optional

from pydantic import Field

from .base import WorkspaceModel


# =============================================================================
# QUESTIONS
# =============================================================================

class Option(WorkspaceModel):
    value: str = ""
    is_other: Optional[bool] = None


class ChoiceQuestion(WorkspaceModel):
    type: Optional[str] = None
    options: List[Option] = Field(default_factory=list)
    shuffle: Optional[bool] = None


class TextQuestion(WorkspaceModel):
    paragraph: Optional[bool] = None


class ScaleQuestion(WorkspaceModel):
    low: int = 1
    high: int = 5
    low_label: Optional[str] = None
    high_label: Optional[str] = None


class DateQuestion(WorkspaceModel):
    include_time: Optional[bool] = None
    include_year: Optional[bool] = None


class TimeQuestion(WorkspaceModel):
    duration: Optional[bool] = None


class FileUploadQuestion(WorkspaceModel):
    folder_id: Optional[str] = None
    types: List[str] = Field(default_factory=list)
    max_files: Optional[int] = None
    max_file_size: Optional[int] = None


class CorrectAnswer(WorkspaceModel):
    value: str = ""


class CorrectAnswers(WorkspaceModel):
    answers: List[CorrectAnswer] = Field(default_factory=list)


class Grading(WorkspaceModel):
    point_value: Optional[int] = None
    correct_answers: Optional[CorrectAnswers] = None


class Question(WorkspaceModel):
    question_id: Optional[str] = None
    required: Optional[bool] = None
    grading: Optional[Grading] = None
    choice_question: Optional[ChoiceQuestion] = None
    text_question: Optional[TextQuestion] = None
    scale_question: Optional[ScaleQuestion] = None
    date_question: Optional[DateQuestion] = None
    time_question: Optional[TimeQuestion] = None
    file_upload_question: Optional[FileUploadQuestion] = None


# =============================================================================
# ITEMS
# =============================================================================

class QuestionItem(WorkspaceModel):
    question: Optional[Question] = None


class QuestionGroupItem(WorkspaceModel):
    questions: List[Question] = Field(default_factory=list)


class PageBreakItem(WorkspaceModel):
    pass


class TextItem(WorkspaceModel):
    pass


class MediaImage(WorkspaceModel):
    alt_text: Optional[str] = None
    content_uri: Optional[str] = None
    source_uri: Optional[str] = None


class ImageItem(WorkspaceModel):
    image: MediaImage = Field(default_factory=MediaImage)


class Video(WorkspaceModel):
    youtube_uri: Optional[str] = None


class VideoItem(WorkspaceModel):
    video: Video = Field(default_factory=Video)
    caption: Optional[str] = None


class Item(WorkspaceModel):
    item_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    question_item: Optional[QuestionItem] = None
    question_group_item: Optional[QuestionGroupItem] = None
    page_break_item: Optional[PageBreakItem] = None
    text_item: Optional[TextItem] = None
    image_item: Optional[ImageItem] = None
    video_item: Optional[VideoItem] = None


class Info(WorkspaceModel):
    title: str = ""
    description: Optional[str] = None
    document_title: Optional[str] = None


class Form(WorkspaceModel):
    form_id: str = ""
    info: Info = Field(default_factory=Info)
    items: List[Item] = Field(default_factory=list)
    responder_uri: Optional[str] = None


# =============================================================================
# RESPONSES
# =============================================================================

class TextAnswer(WorkspaceModel):
    value: str = ""


class TextAnswers(WorkspaceModel):
    answers: List[TextAnswer] = Field(default_factory=list)


class FileUploadAnswer(WorkspaceModel):
    file_id: Optional[str] = None
    file_name: str = ""
    mime_type: Optional[str] = None


class FileUploadAnswers(WorkspaceModel):
    answers: List[FileUploadAnswer] = Field(default_factory=list)


class Answer(WorkspaceModel):
    question_id: Optional[str] = None
    text_answers: Optional[TextAnswers] = None
    file_upload_answers: Optional[FileUploadAnswers] = None


class FormResponse(WorkspaceModel):
    response_id: Optional[str] = None
    create_time: Optional[str] = None
    last_submitted_time: Optional[str] = None
    respondent_email: Optional[str] = None
    answers: Dict[str, Answer] = Field(default_factory=dict)
