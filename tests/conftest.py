"""Root conftest — shared test configuration and resume fixtures."""

import copy
import os

import pytest

# Never relay real messages from a test run
os.environ.setdefault("CONTACT_ENDPOINT", "")
os.environ.setdefault("LOG_FORMAT", "text")

RESUME = {
    "name": "Jane Doe",
    "title": "Platform Engineer",
    "summary": "Builds dependable platforms.\n\nLikes small, sharp tools.",
    "contacts": {
        "email": "jane@example.com",
        "phone": "+1 555 0199",
        "location": "Berlin",
        "links": [
            {"label": "GitHub", "url": "https://github.com/jane"},
            {"label": "LinkedIn", "url": ""},
            {"label": "Blog", "url": "  https://jane.dev  "},
        ],
    },
    "skills": {
        "Languages": ["Python", "Go", "Rust"],
        "Tools": [],
        "Cloud": ["AWS"],
    },
    "education": [
        {"degree": "B.Sc. Physics", "org": "TU Berlin", "period": "2010 – 2013"},
    ],
    "experience": [
        {
            "company": "Acme",
            "role": "Platform Engineer",
            "period": "2019 – Present",
            "highlights": ["Cut deploy time by 40% reduction", "Mentored 3 engineers"],
        },
        {
            "company": "Initech",
            "role": "Developer",
            "period": "2014 – 2019",
            "highlights": ["Shipped billing v2"],
        },
    ],
    "meta": {
        "ogTitle": "Jane Doe - Platform Engineer",
        "ogDesc": "Platform engineering portfolio",
        "keywords": ["platform", "python"],
    },
    "settings": {"showPhone": False},
}


@pytest.fixture
def resume_data() -> dict:
    """Fresh, mutable copy of a valid resume document."""
    return copy.deepcopy(RESUME)
