"""Markdown rendering of generated sections."""

from __future__ import annotations

from resume_maker.models.generation import GeneratedSections

SECTION_LABELS = [
    ("summary", "Summary"),
    ("skills", "Skills"),
    ("experience", "Experience"),
    ("education", "Education"),
]


def render_markdown(sections: GeneratedSections, title: str | None = None) -> str:
    """Assemble a Markdown document, skipping empty sections."""
    parts: list[str] = []
    if title:
        parts.append(f"# {title}")
    for key, label in SECTION_LABELS:
        content = getattr(sections, key).strip()
        if content:
            parts.append(f"## {label}\n\n{content}")
    return "\n\n".join(parts) + "\n"
