import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.deps import get_interview_pipeline, get_response_formatter
from app.services.pipeline.interview_pipeline import InterviewPipeline
from app.services.pipeline.request_decoder import decode_request_body
from app.services.pipeline.response_formatter import ResponseFormatter

logger = logging.getLogger(__name__)

interview_router = APIRouter()


@interview_router.post("/generate")
async def generate_interview(
    request: Request,
    pipeline: InterviewPipeline = Depends(get_interview_pipeline),
    formatter: ResponseFormatter = Depends(get_response_formatter),
):
    """
    Generates interview questions for the voice assistant and stores the interview.

    The body is read as raw text because tool calls may wrap the JSON object
    in extra characters. Errors are raised as AppError subclasses and
    rendered by the registered exception handlers in the same envelope.

    Flow:
    1. Decode parameters from the raw body (400 on malformed input)
    2. Run the pipeline: prompt, LLM call, extraction/fallback, persistence
    3. Format the questions for the configured consumer
    """
    raw_body = await request.body()
    params = decode_request_body(raw_body.decode("utf-8", errors="replace"))

    result = await pipeline.run(params)
    logger.info(
        f"Interview {result.record_id} ready: {len(result.questions)} question(s)"
        f"{' (fallback)' if result.used_fallback else ''}"
    )

    return JSONResponse(
        content=formatter.format(result.questions, success=True, params=params),
        status_code=200,
    )


@interview_router.get("/generate")
async def generate_status() -> List[str]:
    return ["API is operational"]
