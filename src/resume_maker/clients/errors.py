"""Failure modes of the generation backend call.

These never reach callers of ``GenerationClient.generate_resume``; they drive
the retry policy and are logged before fallback content is substituted.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for generation failures."""


class BackendUnavailableError(GenerationError):
    """Connection refused, DNS failure, timeout or other transport error."""


class BackendStatusError(GenerationError):
    """Backend answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        super().__init__(f"Ollama API error: {status_code} - {reason}".rstrip(" -"))


class ResponseParseError(GenerationError):
    """Backend answered but its output has no usable JSON object."""
