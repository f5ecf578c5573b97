"""Resume Schema — typed shape of the resume document and its validator.

Invariants:
    - Strings and booleans are strict: 1 is not a string, "true" is not a boolean
    - Element shapes of links, education, experience, keywords and skills are checked
    - Parsed documents are frozen; sequences are tuples
    - is_valid_resume_data() is a pure predicate, no logging, no IO

Design Decisions:
    - Validation is deeper than a top-level shape check: a list holding a
      malformed entry fails here instead of at render time
    - JSON keys stay camelCase via aliases; Python attributes are snake_case
"""

from typing import Any

from pydantic import (
    BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError,
)

from resume_site.core.errors import ContentValidationError


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ContactLink(_Frozen):
    label: StrictStr
    url: StrictStr  # empty string means "not provided"


class Contacts(_Frozen):
    email: StrictStr
    phone: StrictStr
    location: StrictStr
    links: tuple[ContactLink, ...]


class EducationEntry(_Frozen):
    degree: StrictStr
    org: StrictStr
    period: StrictStr
    details: StrictStr | None = None


class ExperienceEntry(_Frozen):
    company: StrictStr
    role: StrictStr
    period: StrictStr
    highlights: tuple[StrictStr, ...]


class Meta(_Frozen):
    og_title: StrictStr = Field(alias="ogTitle")
    og_desc: StrictStr = Field(alias="ogDesc")
    keywords: tuple[StrictStr, ...]


class DisplaySettings(_Frozen):
    show_phone: StrictBool = Field(alias="showPhone")


class ResumeContent(_Frozen):
    """The whole resume document. Read-only once parsed."""
    name: StrictStr
    title: StrictStr
    summary: StrictStr
    contacts: Contacts
    skills: dict[StrictStr, tuple[StrictStr, ...]]
    education: tuple[EducationEntry, ...]
    experience: tuple[ExperienceEntry, ...]
    meta: Meta
    settings: DisplaySettings


def parse_resume_data(value: Any) -> ResumeContent:
    """Validate a decoded JSON value and return the typed document.

    Raises ContentValidationError naming every failing field path.
    """
    if not isinstance(value, dict):
        raise ContentValidationError(
            "Invalid resume data structure: root must be an object",
            problems=["<root>: expected an object"],
        )
    try:
        return ResumeContent.model_validate(value)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ContentValidationError(
            "Invalid resume data structure. Please check the resume JSON file.",
            problems=problems,
        ) from e


def is_valid_resume_data(value: Any) -> bool:
    """True iff value conforms to the resume document shape."""
    try:
        parse_resume_data(value)
    except ContentValidationError:
        return False
    return True
