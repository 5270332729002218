from .interview_repository import InterviewRepository

__all__ = ['InterviewRepository']
