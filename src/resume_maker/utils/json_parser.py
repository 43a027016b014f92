"""Utility to extract a JSON object from free-form model output."""

from __future__ import annotations

import json

_decoder = json.JSONDecoder()


def extract_json(text: str | None) -> dict | None:
    """Return the first JSON object embedded in ``text``, or None.

    Scans left to right from every ``{`` and decodes the longest valid JSON
    value starting there, so surrounding prose and ```json fences are ignored.
    The first position that decodes to an object wins: for nested objects
    that is the outermost one, and with several sibling objects it is the
    first. Braces inside JSON strings are handled by the decoder. Arrays and
    scalars are never returned.
    """
    if not text:
        return None

    start = text.find("{")
    while start != -1:
        try:
            value, _ = _decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            pass
        else:
            if isinstance(value, dict):
                return value
        start = text.find("{", start + 1)
    return None
