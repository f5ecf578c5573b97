"""Resume Schema — validator accepts well-formed documents and rejects malformed ones.

Tests cover:
    - Every required top-level field, when missing, fails validation
    - Strict typing (no number → string, no "true" → bool coercion)
    - Element-level checks on links, education, experience, skills
    - parse_resume_data returns frozen typed content or ContentValidationError
"""

import pytest
from pydantic import ValidationError

from resume_site.core.errors import ContentValidationError
from resume_site.schemas.resume import (
    ResumeContent, is_valid_resume_data, parse_resume_data,
)

TOP_LEVEL_FIELDS = [
    "name", "title", "summary", "contacts", "skills",
    "education", "experience", "meta", "settings",
]


def test_well_formed_document_is_valid(resume_data):
    assert is_valid_resume_data(resume_data)


@pytest.mark.parametrize("field", TOP_LEVEL_FIELDS)
def test_missing_top_level_field_is_invalid(resume_data, field):
    del resume_data[field]
    assert not is_valid_resume_data(resume_data)


@pytest.mark.parametrize("value", [None, [], "resume", 42, True])
def test_non_object_root_is_invalid(value):
    assert not is_valid_resume_data(value)


def test_contacts_must_be_an_object(resume_data):
    resume_data["contacts"] = "jane@example.com"
    assert not is_valid_resume_data(resume_data)


@pytest.mark.parametrize("field", ["email", "phone", "location"])
def test_contact_fields_must_be_strings(resume_data, field):
    resume_data["contacts"][field] = 12345
    assert not is_valid_resume_data(resume_data)


def test_contact_strings_may_be_empty(resume_data):
    resume_data["contacts"]["phone"] = ""
    resume_data["contacts"]["location"] = ""
    assert is_valid_resume_data(resume_data)


def test_links_must_be_a_sequence(resume_data):
    resume_data["contacts"]["links"] = {"label": "GitHub", "url": ""}
    assert not is_valid_resume_data(resume_data)


def test_malformed_link_element_is_invalid(resume_data):
    resume_data["contacts"]["links"].append({"label": "Site"})
    assert not is_valid_resume_data(resume_data)


def test_skills_must_be_an_object(resume_data):
    resume_data["skills"] = ["Python"]
    assert not is_valid_resume_data(resume_data)


def test_skill_lists_must_hold_strings(resume_data):
    resume_data["skills"]["Languages"] = ["Python", 3]
    assert not is_valid_resume_data(resume_data)


def test_education_and_experience_must_be_sequences(resume_data):
    resume_data["education"] = {"degree": "x"}
    assert not is_valid_resume_data(resume_data)


def test_experience_entry_requires_highlights(resume_data):
    del resume_data["experience"][0]["highlights"]
    assert not is_valid_resume_data(resume_data)


def test_education_details_are_optional(resume_data):
    resume_data["education"][0]["details"] = "Graduated with honours"
    content = parse_resume_data(resume_data)
    assert content.education[0].details == "Graduated with honours"


def test_meta_requires_string_titles_and_keyword_list(resume_data):
    resume_data["meta"]["keywords"] = "platform, python"
    assert not is_valid_resume_data(resume_data)


def test_show_phone_must_be_a_real_boolean(resume_data):
    resume_data["settings"]["showPhone"] = "true"
    assert not is_valid_resume_data(resume_data)


def test_empty_collections_are_valid(resume_data):
    resume_data["skills"] = {}
    resume_data["education"] = []
    resume_data["experience"] = []
    resume_data["contacts"]["links"] = []
    assert is_valid_resume_data(resume_data)


def test_parse_returns_typed_content(resume_data):
    content = parse_resume_data(resume_data)
    assert isinstance(content, ResumeContent)
    assert content.meta.og_title == "Jane Doe - Platform Engineer"
    assert content.settings.show_phone is False
    assert content.contacts.links[0].label == "GitHub"
    assert list(content.skills) == ["Languages", "Tools", "Cloud"]


def test_parsed_content_is_frozen(resume_data):
    content = parse_resume_data(resume_data)
    with pytest.raises(ValidationError):
        content.name = "Someone Else"
    assert isinstance(content.experience, tuple)


def test_parse_error_lists_failing_paths(resume_data):
    resume_data["contacts"]["email"] = None
    del resume_data["settings"]
    with pytest.raises(ContentValidationError) as exc_info:
        parse_resume_data(resume_data)
    problems = " ".join(exc_info.value.problems)
    assert "contacts.email" in problems
    assert "settings" in problems
    assert exc_info.value.code == "CONTENT_INVALID"
