"""
Outbound envelopes for the voice platform.

Two integrations consume this endpoint: one reads the HTTP body directly as
the tool result and expects a bare JSON array, the other expects an object
whose single "result" field holds a JSON-encoded summary. The mode is chosen
once per deployment (RESPONSE_MODE) and used for successes and errors alike.
"""
import json
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from app.schemas.interview import InterviewParams

Payload = Union[List[str], Dict[str, str]]


class OutputMode(str, Enum):
    ARRAY = "array"
    WRAPPED = "wrapped"


class ResponseFormatter:
    """Renders question lists and error messages in the configured envelope."""

    def __init__(self, mode: Union[OutputMode, str] = OutputMode.ARRAY):
        self.mode = OutputMode(mode)

    def format(
        self,
        questions: List[str],
        success: bool = True,
        error_message: Optional[str] = None,
        params: Optional[InterviewParams] = None,
    ) -> Payload:
        if self.mode is OutputMode.ARRAY:
            if success:
                return list(questions)
            return [f"Error: {error_message or 'Unknown error'}"]
        return {"result": json.dumps(self._summary(questions, success, error_message, params))}

    @staticmethod
    def _summary(
        questions: List[str],
        success: bool,
        error_message: Optional[str],
        params: Optional[InterviewParams],
    ) -> Dict[str, Any]:
        if not success:
            return {"success": False, "error": error_message or "Unknown error"}

        summary: Dict[str, Any] = {
            "success": True,
            "message": f"Successfully generated {len(questions)} interview questions",
            "questionCount": len(questions),
            "questions": list(questions),
        }
        if params is not None:
            summary.update({
                "role": params.role,
                "level": params.level,
                "type": params.type,
                "techstack": params.techstack,
            })
        return summary
