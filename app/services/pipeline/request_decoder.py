"""Decodes the voice platform's request body into interview parameters."""
import json
import logging

from pydantic import ValidationError

from app.core.exceptions import RequestBodyError
from app.schemas.interview import InterviewParams

logger = logging.getLogger(__name__)


def decode_request_body(raw_text: str) -> InterviewParams:
    """
    Parse interview parameters from a raw request body.

    Tool-call bodies sometimes arrive with noise around the JSON object, so
    only the span from the first '{' to the last '}' is parsed.

    Raises:
        RequestBodyError: If no JSON object is present or it cannot be parsed.
    """
    logger.debug(f"Received raw request body: {raw_text[:500]}")

    first_brace = raw_text.find('{')
    last_brace = raw_text.rfind('}')
    if first_brace == -1 or last_brace < first_brace:
        raise RequestBodyError("Request must contain a JSON object")

    json_text = raw_text[first_brace:last_brace + 1]
    try:
        body = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise RequestBodyError(f"Invalid JSON format - {e.msg}") from e

    if not isinstance(body, dict):
        raise RequestBodyError("Request must contain a JSON object")

    try:
        return InterviewParams(**body)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise RequestBodyError(f"Invalid interview parameters: {fields}") from e
