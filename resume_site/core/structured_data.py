"""Structured Data — schema.org Person payload (JSON-LD) built from resume content.

Invariants:
    - telephone is present only when settings.show_phone is true
    - sameAs lists only links with a non-blank url
    - Periods are split on " – " (en dash); a period mentioning "Present" ends in current_year
"""

from resume_site.core.content_views import flattened_skills, valid_contact_links
from resume_site.schemas.resume import ResumeContent

PERIOD_SEPARATOR = " – "
_SEEKS = (
    "Software development opportunities, technical consulting, "
    "and collaborative projects"
)


def split_period(period: str, current_year: int) -> tuple[str, str | None]:
    """'2021 – Present' → ('2021', '<current_year>'); '2019 – 2021' → ('2019', '2021')."""
    parts = period.split(PERIOD_SEPARATOR)
    start = parts[0]
    if "Present" in period:
        return start, str(current_year)
    return start, parts[1] if len(parts) > 1 else None


def build_person_schema(
    content: ResumeContent, site_url: str, current_year: int,
) -> dict:
    contacts = content.contacts
    skills = flattened_skills(content.skills)

    work_experience = []
    for exp in content.experience:
        start, end = split_period(exp.period, current_year)
        work_experience.append({
            "@type": "WorkExperience",
            "jobTitle": exp.role,
            "employer": {
                "@type": "Organization",
                "name": exp.company or "Current Company",
            },
            "startDate": start,
            "endDate": end,
            "description": ". ".join(exp.highlights),
        })

    credentials = [
        {
            "@type": "EducationalOccupationalCredential",
            "name": edu.degree,
            "educationalCredentialAwarded": edu.degree,
            "recognizedBy": {"@type": "EducationalOrganization", "name": edu.org},
            "dateCreated": edu.period,
        }
        for edu in content.education
    ]

    person: dict = {
        "@context": "https://schema.org",
        "@type": "Person",
        "name": content.name,
        "jobTitle": content.title,
        "description": content.summary,
        "email": contacts.email,
    }
    if content.settings.show_phone:
        person["telephone"] = contacts.phone
    person.update({
        "address": {
            "@type": "PostalAddress",
            "addressLocality": contacts.location,
        },
        "url": site_url,
        "image": f"{site_url}/api/og",
        "sameAs": [link.url for link in valid_contact_links(contacts.links)],
        "knowsAbout": skills,
        "workExperience": work_experience,
        "educationalCredential": credentials,
        "seeks": {"@type": "Demand", "description": _SEEKS},
        "alumniOf": [
            {"@type": "EducationalOrganization", "name": edu.org}
            for edu in content.education
        ],
        "hasOccupation": {
            "@type": "Occupation",
            "name": content.title,
            "description": content.summary,
            "skills": skills,
        },
    })
    return person
