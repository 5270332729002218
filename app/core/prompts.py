from typing import List, Union

from app.schemas.interview import InterviewParams


def _techstack_text(techstack: Union[str, List[str]]) -> str:
    if isinstance(techstack, list):
        return ", ".join(techstack)
    return techstack


def generate_interview_prompt(params: InterviewParams) -> str:
    """
    Generate the prompt asking the model for a JSON array of interview questions.

    The questions are read aloud by a voice assistant, so the prompt asks the
    model to avoid characters that break speech synthesis.

    Args:
        params: Decoded interview parameters.

    Returns:
        The formatted prompt string.
    """
    return (
        "Prepare questions for a job interview.\n"
        f"The job role is {params.role}.\n"
        f"The job experience level is {params.level}.\n"
        f"The tech stack used in the job is: {_techstack_text(params.techstack)}.\n"
        f"The focus between behavioural and technical questions should lean towards: {params.type}.\n"
        f"The amount of questions required is: {params.amount}.\n"
        "Please return only the questions, without any additional text.\n"
        "The questions are going to be read by a voice assistant so do not use \"/\" or \"*\" "
        "or any other special characters which might break the voice assistant.\n"
        "Return the questions formatted like this:\n"
        "[\"Question 1\", \"Question 2\", \"Question 3\"]"
    )
