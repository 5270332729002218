"""In-memory stand-ins for the LLM provider and the interview store."""
from typing import List, Optional

from app.core.exceptions import PersistenceError
from app.schemas.interview import InterviewRecord


class FakeLLMClient:
    """Returns a canned reply or raises a canned error, recording prompts."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeInterviewRepository:
    """In-memory stand-in for InterviewRepository."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.records: List[InterviewRecord] = []

    async def add(self, record: InterviewRecord) -> str:
        if self.fail:
            raise PersistenceError("Failed to save interview: database is locked")
        self.records.append(record)
        return f"interview-{len(self.records)}"
