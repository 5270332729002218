"""
Interview Question Generation Package

Architecture:
- interview_pipeline.py: Request orchestration
- request_decoder.py: Raw body -> InterviewParams
- question_extractor.py: LLM reply -> validated question list
- fallback_questions.py: Templated questions when extraction finds none
- record_builder.py: Interview record construction
- cover_images.py: Cover image selection
- response_formatter.py: Outbound envelope (plain array or wrapped)
"""

from .interview_pipeline import InterviewPipeline, GenerationResult
from .question_extractor import extract_questions
from .fallback_questions import fallback_questions
from .record_builder import build_interview_record
from .request_decoder import decode_request_body
from .response_formatter import OutputMode, ResponseFormatter

__all__ = [
    'InterviewPipeline',
    'GenerationResult',
    'extract_questions',
    'fallback_questions',
    'build_interview_record',
    'decode_request_body',
    'OutputMode',
    'ResponseFormatter',
]
