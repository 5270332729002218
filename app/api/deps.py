from fastapi import Depends, Request

from app.core.config import settings
from app.core.llm import LLMClient, build_llm_client
from app.services.pipeline.interview_pipeline import InterviewPipeline
from app.services.pipeline.response_formatter import ResponseFormatter
from app.services.storage.interview_repository import InterviewRepository


def get_llm_client() -> LLMClient:
    """Dependency providing the client for the configured LLM provider."""
    return build_llm_client(settings)


def get_interview_repository() -> InterviewRepository:
    return InterviewRepository()


def get_interview_pipeline(
    llm_client: LLMClient = Depends(get_llm_client),
    repository: InterviewRepository = Depends(get_interview_repository),
) -> InterviewPipeline:
    """
    Dependency for providing an InterviewPipeline wired to the configured
    provider, the interview store and the configured denylist.
    """
    return InterviewPipeline(
        llm_client=llm_client,
        repository=repository,
        denylist=settings.QUESTION_DENYLIST,
    )


def get_response_formatter(request: Request) -> ResponseFormatter:
    """The formatter resolved once at startup and shared with the exception handlers."""
    return request.app.state.response_formatter
