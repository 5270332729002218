"""Assembles the interview document persisted for each generated question set."""
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Union

from app.schemas.interview import InterviewParams, InterviewRecord
from app.services.pipeline.cover_images import get_random_interview_cover


def normalize_techstack(techstack: Union[str, Sequence[str], None]) -> List[str]:
    """
    Split a comma-delimited tech stack into trimmed entries.
    A list is passed through unchanged.
    """
    if techstack is None:
        return []
    if isinstance(techstack, str):
        return [item.strip() for item in techstack.split(",") if item.strip()]
    return list(techstack)


def build_interview_record(
    params: InterviewParams,
    questions: List[str],
    cover_image: Optional[str] = None,
    now: Optional[datetime] = None,
) -> InterviewRecord:
    """
    Build the immutable interview record for a request.

    role, level and type are passed through as supplied by the caller.

    Args:
        params: Decoded request parameters.
        questions: Final question list (extracted or fallback).
        cover_image: Cover path; a random one is chosen when omitted.
        now: Creation time; defaults to the current UTC time.
    """
    created_at = (now or datetime.now(timezone.utc)).isoformat()
    return InterviewRecord(
        role=params.role,
        type=params.type,
        level=params.level,
        techstack=normalize_techstack(params.techstack),
        questions=list(questions),
        user_id=params.userid,
        finalized=True,
        cover_image=cover_image if cover_image is not None else get_random_interview_cover(),
        created_at=created_at,
    )
