import json
import logging
import re

from pydantic import ValidationError as SchemaError

import codecritic.errors as errors
from codecritic.schemas import ReviewResult

_LEADING_FENCE = re.compile(r"^\s*```(?:json)?[ \t]*\n?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```\s*$")


def require_code(code: str) -> str:
    code = code.strip()
    if not code:
        raise errors.ValidationError()
    return code


def strip_code_fences(text: str) -> str:
    """
    Removes a leading ``` / ```json marker and a trailing ``` marker,
    plus the whitespace around them. Fences inside the text are left alone.
    """
    cleaned = _LEADING_FENCE.sub("", text.strip(), count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_review_text(text: str) -> ReviewResult:
    cleaned = strip_code_fences(text)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logging.error(f"Failed to parse JSON from AI response: {e}; raw: {cleaned!r}")
        raise errors.MalformedResponseError(cleaned) from e

    if not isinstance(data, dict):
        logging.error(f"AI response is not a JSON object: {cleaned!r}")
        raise errors.MalformedResponseError(cleaned)

    try:
        return ReviewResult.model_validate(data)
    except SchemaError as e:
        logging.error(f"AI response does not match the review schema: {e}; raw: {cleaned!r}")
        raise errors.MalformedResponseError(cleaned) from e
