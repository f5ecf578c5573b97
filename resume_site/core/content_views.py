"""Content Views — derived, read-only views over a parsed resume document.

Invariants:
    - Source order is preserved in every view
    - No view ever returns a link whose url is blank after trimming
    - No view ever returns a skill category with zero skills
    - The phone number is only exposed when settings.show_phone is true
"""

from dataclasses import dataclass

from resume_site.schemas.resume import ContactLink, ResumeContent

MAX_KEY_STRENGTHS = 6
STRENGTHS_PER_CATEGORY = 2


@dataclass(frozen=True)
class KeyStrength:
    skill: str
    category: str


@dataclass(frozen=True)
class ContactDetail:
    label: str
    value: str
    href: str | None = None


def valid_contact_links(links: tuple[ContactLink, ...]) -> tuple[ContactLink, ...]:
    """Links whose url, trimmed, is non-empty."""
    return tuple(link for link in links if link.url.strip() != "")


def skills_with_content(
    skills: dict[str, tuple[str, ...]],
) -> dict[str, tuple[str, ...]]:
    """Skill categories holding at least one skill."""
    return {
        category: skill_list
        for category, skill_list in skills.items()
        if len(skill_list) > 0
    }


def key_strengths(skills: dict[str, tuple[str, ...]]) -> list[KeyStrength]:
    """First two skills of each non-empty category, capped at six overall."""
    strengths = [
        KeyStrength(skill=skill, category=category)
        for category, skill_list in skills_with_content(skills).items()
        for skill in skill_list[:STRENGTHS_PER_CATEGORY]
    ]
    return strengths[:MAX_KEY_STRENGTHS]


def visible_contact_details(content: ResumeContent) -> list[ContactDetail]:
    """Direct contact entries shown on the page (email, phone if allowed, location)."""
    contacts = content.contacts
    details = [
        ContactDetail("Email", contacts.email, f"mailto:{contacts.email}"),
    ]
    if content.settings.show_phone:
        details.append(
            ContactDetail("Phone", contacts.phone, f"tel:{contacts.phone}"),
        )
    details.append(ContactDetail("Location", contacts.location))
    return details


def flattened_skills(skills: dict[str, tuple[str, ...]]) -> list[str]:
    return [skill for skill_list in skills.values() for skill in skill_list]
