"""
Interview Question Generation Pipeline Orchestrator.

This module orchestrates one generation request:
1. Prompt construction from the decoded parameters
2. LLM call through the configured provider client
3. Question extraction from the raw reply (fallback questions if nothing usable)
4. Interview record construction and persistence

Orchestration only; every step delegates to a dedicated module.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional

from app.core.llm import LLMClient
from app.core.logger import log_async_execution_time
from app.core.prompts import generate_interview_prompt
from app.schemas.interview import InterviewParams, InterviewRecord
from app.services.pipeline.cover_images import get_random_interview_cover
from app.services.pipeline.fallback_questions import fallback_questions
from app.services.pipeline.question_extractor import (
    DEFAULT_DENYLIST,
    coerce_count,
    extract_questions,
    normalize_denylist,
)
from app.services.pipeline.record_builder import build_interview_record
from app.services.storage.interview_repository import InterviewRepository

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    questions: List[str]
    record: InterviewRecord
    record_id: str
    used_fallback: bool = False
    raw_text: str = field(default="", repr=False)


class InterviewPipeline:
    """
    Orchestrates question generation for a single request.

    Provider and persistence errors propagate to the API layer; an
    extraction shortfall is not an error and is covered by fallback questions.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        repository: InterviewRepository,
        denylist: Iterable[str] = DEFAULT_DENYLIST,
        cover_selector: Callable[[], str] = get_random_interview_cover,
        logger: Optional[logging.Logger] = None,
    ):
        self.llm_client = llm_client
        self.repository = repository
        self.denylist = normalize_denylist(denylist)
        self.cover_selector = cover_selector
        self.logger = logger or logging.getLogger(__name__)

    @log_async_execution_time
    async def run(self, params: InterviewParams) -> GenerationResult:
        requested_count = coerce_count(params.amount)
        self.logger.info(
            f"Generating {requested_count} '{params.type}' question(s) for {params.level} {params.role} "
            f"(user={params.userid})"
        )

        prompt = generate_interview_prompt(params)
        raw_text = await self.llm_client.generate(prompt)
        self.logger.debug(f"Raw model reply ({len(raw_text)} chars): {raw_text[:500]}")

        questions = extract_questions(raw_text, requested_count, denylist=self.denylist)
        used_fallback = not questions
        if used_fallback:
            self.logger.warning(
                f"No usable questions in model reply ({len(raw_text)} chars); using fallback questions"
            )
            questions = fallback_questions(params.role, params.techstack, requested_count)
        else:
            self.logger.info(f"Extracted {len(questions)}/{requested_count} question(s) from model reply")

        record = build_interview_record(params, questions, cover_image=self.cover_selector())
        record_id = await self.repository.add(record)

        return GenerationResult(
            questions=questions,
            record=record,
            record_id=record_id,
            used_fallback=used_fallback,
            raw_text=raw_text,
        )
