"""Offline, template-based resume sections used when the model is unavailable."""

from __future__ import annotations

from resume_maker.models.generation import (
    ExperienceEntry,
    GeneratedSections,
    GenerationRequest,
)

SOFT_SKILLS = ["Problem-solving", "Communication", "Teamwork", "Time Management", "Critical Thinking"]
SENIOR_SKILLS = ["Leadership", "Project Management", "Strategic Planning"]

FRESHER_EXPERIENCE = (
    "Entry-level position seeking opportunities to apply academic knowledge "
    "and develop professional experience."
)
EXPERIENCED_PLACEHOLDER = (
    "Professional experience with progressive responsibilities "
    "and consistent achievement of objectives."
)

EDUCATION = {
    "fresher": (
        "Bachelor's degree in relevant field with strong academic performance. "
        "Recent graduate whose coursework and projects demonstrate practical "
        "application of theoretical concepts."
    ),
    "mid": (
        "Bachelor's degree in relevant field complemented by professional "
        "certifications and continuous learning initiatives."
    ),
    "senior": (
        "Advanced degree with specialized focus. Continuous professional development "
        "through industry certifications and executive education programs."
    ),
}


def _summary(request: GenerationRequest) -> str:
    lead = request.skills[0] if request.skills else "professional"
    if request.template_type == "fresher":
        return (
            f"Motivated and enthusiastic {lead} with strong academic background and keen "
            "interest in learning new technologies. Seeking to apply technical skills and "
            "passion for innovation in a challenging role."
        )
    background = "proven track record" if request.has_experience else "strong background"
    return (
        f"Experienced {lead} with {background} in {', '.join(request.skills[:3])}. "
        "Committed to delivering high-quality results and driving organizational "
        "success through expertise and dedication."
    )


def _skills(request: GenerationRequest) -> str:
    additional = SOFT_SKILLS + (SENIOR_SKILLS if request.template_type == "senior" else [])
    return (
        f"Technical Skills: {', '.join(request.skills)}\n"
        f"Additional Skills: {', '.join(additional)}"
    )


def _experience_entry(entry: ExperienceEntry) -> str:
    text = f"{entry.position} at {entry.company}"
    if entry.description:
        text += f": {entry.description}"
    if entry.achievements:
        text += f". Key achievements: {', '.join(entry.achievements)}"
    return text


def _experience(request: GenerationRequest) -> str:
    if request.has_experience:
        return "\n\n".join(_experience_entry(e) for e in request.experience_history)
    if request.template_type == "fresher":
        return FRESHER_EXPERIENCE
    return EXPERIENCED_PLACEHOLDER


def synthesize_fallback(request: GenerationRequest) -> GeneratedSections:
    """Build all four sections from the request alone. Never fails, no I/O."""
    return GeneratedSections(
        summary=_summary(request),
        skills=_skills(request),
        experience=_experience(request),
        education=EDUCATION[request.template_type],
    )
