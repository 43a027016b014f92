"""Prompt Builder - Turns a generation request into instructions for the model."""

from __future__ import annotations

from resume_maker.models.generation import ExperienceEntry, GenerationRequest

NO_EXPERIENCE = "No experience provided"
NO_JOB_DESCRIPTION = "Not provided"

RESPONSE_FORMAT = """\
IMPORTANT: Respond with a valid JSON object only, containing these exact keys:
{
  "summary": "Professional summary text here",
  "skills": "Enhanced skills description here",
  "experience": "Experience description here (or empty string for fresher)",
  "education": "Education content here"
}

Do not include any explanations, markdown formatting, or text outside the JSON object. \
Ensure the JSON is properly formatted and valid."""


def format_experience_line(entry: ExperienceEntry) -> str:
    line = f"- {entry.position} at {entry.company}"
    if entry.description:
        line += f": {entry.description}"
    if entry.achievements:
        line += f". Achievements: {', '.join(entry.achievements)}"
    return line


def build_prompt(request: GenerationRequest) -> str:
    """Render the resume-writing prompt for ``request``."""
    if request.experience_history:
        experience_text = "\n".join(
            format_experience_line(entry) for entry in request.experience_history
        )
    else:
        experience_text = NO_EXPERIENCE

    return f"""You are an expert resume writer. Generate a professional resume based on the following information:

Template Type: {request.template_type}
Skills: {', '.join(request.skills)}

Experience History:
{experience_text}

Job Description: {request.job_description or NO_JOB_DESCRIPTION}

Please generate a comprehensive resume with the following sections:
1. Professional Summary - A compelling 2-3 sentence summary highlighting key qualifications
2. Skills Section - Enhanced skills description that incorporates the provided skills
3. Experience Section - Professional experience description if applicable
4. Education Section - Suggested education content based on the experience level

{RESPONSE_FORMAT}"""
