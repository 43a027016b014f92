"""Export module for generated resume sections."""
from resume_maker.export.markdown import SECTION_LABELS, render_markdown

__all__ = ["render_markdown", "SECTION_LABELS"]
