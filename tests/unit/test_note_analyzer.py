"""
Unit tests for notebridge/analysis/analyzer.py - NoteAnalyzer
"""
import pytest
from config.settings import Settings
from notebridge.analysis import (
    NoteAnalyzer,
    analyze_note,
    count_paragraphs,
    count_words,
    extract_title,
)


ARTICLE_BLOCKS = [
    "# One", "Para a.", "Para b.",
    "# Two", "Para c.", "Para d.",
    "# Three", "Para e.",
    "# Four", "Para f.",
]


@pytest.fixture
def analyzer(test_settings):
    return NoteAnalyzer(settings=test_settings)


class TestTitleAndCounts:

    def test_title_from_h1(self):
        assert analyze_note("# Hello\n\nSome text.", "fallback.md").title == "Hello"

    def test_title_from_fallback(self):
        assert analyze_note("no heading here", "MyNote.md").title == "MyNote"

    def test_title_from_front_matter(self):
        assert extract_title('---\ntitle: "My Plan"\n---\nbody', "x.md") == "My Plan"

    def test_markdown_suffix_removed(self):
        assert extract_title("", "Notes.markdown") == "Notes"

    def test_h2_is_not_a_title(self):
        assert extract_title("## Sub\n", "file.txt") == "file.txt"

    def test_word_count_ignores_front_matter(self):
        assert count_words("---\ntitle: x\ntags: a b\n---\none two three") == 3

    def test_paragraph_count(self):
        text = "# H\n\nPara one.\n\n- item\n\n| a |\n\nPara two."
        assert count_paragraphs(text) == 2

    def test_line_count(self, analyzer):
        assert analyzer.analyze("a\nb\nc", "n.md").line_count == 3


class TestDocsAnalysis:

    def test_pages_and_flags(self, analyzer):
        text = "word " * 600 + "\n![pic](a.png) [link](b) | x | y |"
        docs = analyzer.analyze(text, "n.md").docs

        assert docs.estimated_pages == 3
        assert docs.has_images and docs.has_links and docs.has_tables

    def test_minimum_one_page(self, analyzer):
        assert analyzer.analyze("", "n.md").docs.estimated_pages == 1

    def test_article(self, analyzer):
        docs = analyzer.analyze("\n\n".join(ARTICLE_BLOCKS), "n.md").docs

        assert len(docs.headings) == 4
        assert docs.paragraph_count == 6
        assert docs.content_type == "article"

    def test_letter_overrides_article(self, analyzer):
        blocks = ["Dear Sir,"] + [b for b in ARTICLE_BLOCKS if b != "Para a."]
        docs = analyzer.analyze("\n\n".join(blocks), "n.md").docs

        assert len(docs.headings) == 4
        assert docs.paragraph_count == 6
        assert docs.content_type == "letter"

    def test_report_overrides_article(self, analyzer):
        text = "# A\n\n# B\n\n# C\n\nIntroduction\n\np1\n\np2\n\np3\n\np4"
        assert analyzer.analyze(text, "n.md").docs.content_type == "report"

    def test_notes_overrides_letter(self, analyzer):
        assert analyzer.analyze("Dear Sam,\n\nSee you soon.", "n.md").docs.content_type == "notes"

    def test_general(self, analyzer):
        text = "\n\n".join(["# A", "# B", "# C"] + [f"p{i}" for i in range(4)])
        assert analyzer.analyze(text, "n.md").docs.content_type == "general"

    def test_summary(self, analyzer):
        summary = analyzer.analyze("# A\n\nSome words here.", "n.md").docs.summary
        assert summary == "5 words, ~1 pages | 1 sections | 1 paragraphs"


class TestSheetsAnalysis:

    def test_pie_chart(self, analyzer):
        sheets = analyzer.analyze("- Apples: 10\n- Pears: 20\n- Plums: 30", "n.md").sheets

        assert len(sheets.numerical_data) == 3
        assert sheets.suggested_chart_type == "pie"
        assert sheets.has_tabulable_content is True

    def test_bar_chart_for_many_points(self, analyzer):
        text = "\n".join(f"Item{i}: {i}" for i in range(7))
        assert analyzer.analyze(text, "n.md").sheets.suggested_chart_type == "bar"

    def test_long_first_table_forces_bar(self, analyzer):
        text = "| k | v |\n|---|---|\n" + "\n".join(f"| r{i} | x |" for i in range(6))
        sheets = analyzer.analyze(text, "n.md").sheets

        assert sheets.numerical_data == ()
        assert sheets.suggested_chart_type == "bar"

    def test_single_datum_no_chart(self, analyzer):
        assert analyzer.analyze("Total: 5", "n.md").sheets.suggested_chart_type == "none"

    def test_plain_text(self, analyzer):
        sheets = analyzer.analyze("Nothing tabular.", "n.md").sheets

        assert sheets.suggested_chart_type == "none"
        assert sheets.has_tabulable_content is False


class TestSlidesAnalysis:

    TALK = (
        "# Talk\n\nIntro sentence is here. Another sentence follows here.\n\n"
        "## Points\n\n- alpha\n- beta\n\n## Empty\n"
    )

    def test_slide_outline(self, analyzer):
        slides = analyzer.analyze(self.TALK, "n.md").slides

        assert [s.title for s in slides.slides] == ["Talk", "Talk", "Points", "Empty"]
        assert slides.slides[0].layout == "title"
        assert slides.slides[0].speaker_notes == "Introduction"
        assert slides.slides[1].bullet_points == (
            "Intro sentence is here",
            "Another sentence follows here",
        )
        assert slides.slides[1].speaker_notes == "Intro sentence is here. Another sentence follows here."
        assert slides.slides[2].bullet_points == ("alpha", "beta")
        assert slides.slides[2].layout == "title_body"
        assert slides.slides[3].bullet_points == ()
        assert slides.slides[3].layout == "title"

    def test_duration_and_theme(self, analyzer):
        slides = analyzer.analyze(self.TALK, "n.md").slides

        assert slides.duration_minutes == 6
        assert slides.estimated_duration == "~6 min"
        assert slides.theme == "professional"

    def test_bullets_capped(self, analyzer):
        text = "# Deck\n" + "\n".join(f"- b{i}" for i in range(8))
        assert len(analyzer.analyze(text, "n.md").slides.slides[1].bullet_points) == 6

    def test_academic_theme(self, analyzer):
        assert analyzer.analyze("# Paper\nAbstract\nWe study.", "n.md").slides.theme == "academic"

    def test_settings_drive_thresholds(self):
        analyzer = NoteAnalyzer(settings=Settings(_env_file=None, max_slide_bullets=2, minutes_per_slide=3))
        slides = analyzer.analyze("# Deck\n- a\n- b\n- c", "n.md").slides

        assert slides.slides[1].bullet_points == ("a", "b")
        assert slides.duration_minutes == 6


class TestFormsAnalysis:

    def test_quiz(self, analyzer):
        forms = analyzer.analyze("What is 2+2?\n- [ ] 3\n- [x] 4\n", "n.md").forms

        assert forms.form_type == "quiz"
        assert forms.has_answer_key is True
        assert forms.questions[0].correct_answer == "4"
        assert forms.description == "Quiz with 1 questions generated from note content"

    def test_survey_from_scale_question(self, analyzer):
        forms = analyzer.analyze("How happy are you?\n\nRate the service from 1 to 5", "n.md").forms

        assert forms.form_type == "survey"
        assert forms.is_survey_likely is True
        assert [q.type for q in forms.questions] == ["short_answer", "scale"]
        assert forms.description == "Survey with 2 questions to gather responses"

    def test_registration(self, analyzer):
        forms = analyzer.analyze("Register for the workshop\n\nQ: Your name", "n.md").forms
        assert forms.form_type == "registration"

    def test_feedback_with_english_only_vocabulary(self, test_settings):
        from notebridge.analysis.patterns import KeywordTable

        keywords = KeywordTable(feedback_keywords=["feedback"])
        forms = NoteAnalyzer(settings=test_settings, keywords=keywords).analyze("Send feedback", "n.md").forms
        assert forms.form_type == "feedback"

    def test_general(self, analyzer):
        forms = analyzer.analyze("Q: Your name", "n.md").forms

        assert forms.form_type == "general"
        assert forms.description == "Form with 1 questions based on note content"


class TestFullNote:

    def test_meeting_note(self, analyzer, meeting_note):
        analysis = analyzer.analyze(meeting_note, "review.md")

        assert analysis.title == "Quarterly Review"
        assert analysis.sheets.tables[0].headers == ("Region", "Sales")
        assert [d.label for d in analysis.sheets.numerical_data] == ["Revenue", "Churn"]
        assert {q.type for q in analysis.forms.questions} == {"multiple_choice", "paragraph"}
        assert analysis.slides.slides[0].layout == "title"

    def test_analysis_cannot_be_mutated(self, analyzer, meeting_note):
        analysis = analyzer.analyze(meeting_note, "review.md")

        assert isinstance(analysis.slides.slides, tuple)
        assert isinstance(analysis.sheets.tables[0].rows[0], tuple)
        with pytest.raises(AttributeError):
            analysis.slides.slides.append(analysis.slides.slides[0])
        with pytest.raises(AttributeError):
            analysis.forms.questions[0].options.append("extra")

    def test_lists_passed_in_are_copied(self):
        from notebridge.analysis import SlideProposal

        bullets = ["one", "two"]
        slide = SlideProposal(title="Plan", bullet_points=bullets)
        bullets.append("three")

        assert slide.bullet_points == ("one", "two")
