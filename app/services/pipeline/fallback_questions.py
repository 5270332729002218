"""Templated questions used when no question could be extracted from the model reply."""
from typing import Any, List, Sequence, Union

from app.services.pipeline.question_extractor import coerce_count

DEFAULT_ROLE = "Software Engineer"
DEFAULT_TECH_STACK = "this tech stack"

FALLBACK_TEMPLATES = (
    "Can you tell me about your experience working as a {role}?",
    "How do you approach solving a difficult problem in your work as a {role}?",
    "What are your strongest skills when working with {tech_stack}?",
    "Can you describe a challenging project where you used {tech_stack}, and how you handled it?",
    "How do you stay current with new trends and tools that matter for a {role}?",
)


def _describe_tech_stack(tech_stack: Union[str, Sequence[str], None]) -> str:
    if isinstance(tech_stack, (list, tuple)):
        tech_stack = ", ".join(str(item).strip() for item in tech_stack if str(item).strip())
    tech_stack = (tech_stack or "").strip()
    return tech_stack or DEFAULT_TECH_STACK


def fallback_questions(role: str, tech_stack: Union[str, Sequence[str], None], requested_count: Any) -> List[str]:
    """
    Build deterministic, role-aware questions.

    Always returns between 1 and len(FALLBACK_TEMPLATES) questions; an invalid
    count falls back to the default of 5.
    """
    count = coerce_count(requested_count)
    context = {
        "role": (role or "").strip() or DEFAULT_ROLE,
        "tech_stack": _describe_tech_stack(tech_stack),
    }
    questions = [template.format(**context) for template in FALLBACK_TEMPLATES]
    return questions[:max(count, 1)]
