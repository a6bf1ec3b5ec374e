from services.highlighter import HIGHLIGHT_OPEN
from services.preview import highlight_resume


def test_preview_highlights_item_fields(sample_resume):
    preview = highlight_resume(sample_resume, ["python", "communication", "google"])
    exp_item = preview.sections[2].items[0]
    assert HIGHLIGHT_OPEN in exp_item.title
    assert HIGHLIGHT_OPEN in exp_item.subtitle
    assert HIGHLIGHT_OPEN in exp_item.description
    assert "<br>" in exp_item.description
    assert exp_item.date == "Jan 2023 - Present"


def test_preview_skills_title_is_not_highlighted(sample_resume):
    preview = highlight_resume(sample_resume, ["back-end", "python"])
    skills_item = preview.sections[1].items[0]
    assert HIGHLIGHT_OPEN not in skills_item.title
    assert HIGHLIGHT_OPEN in skills_item.description


def test_preview_escapes_everything(sample_resume):
    preview = highlight_resume(sample_resume, [])
    summary = preview.sections[0].items[0].description
    assert summary == "Engineer building React apps &amp; APIs."
    assert HIGHLIGHT_OPEN not in summary
    assert preview.full_name == "John Smith"
    assert preview.contact == ["+1 (555) 123-4567", "john.smith@example.com", "San Francisco, CA"]
