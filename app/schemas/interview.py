from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field

# --- Inbound Models ---

class InterviewParams(BaseModel):
    """Interview parameters decoded from the voice platform's tool call."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    type: str = Field(default="technical", description="Question focus: behavioural, technical or mixed.")
    role: str = Field(default="Software Engineer", description="Job role being interviewed for.")
    level: str = Field(default="mid", description="Seniority level of the role.")
    techstack: Union[str, List[str]] = Field(
        default="",
        description="Comma-delimited string or list of technologies."
    )
    amount: Any = Field(default="5", description="Requested number of questions; coerced later.")
    userid: str = Field(default="anonymous", description="Requester id.")

# --- Persistence Models ---

class InterviewRecord(BaseModel):
    """
    The interview document written once per successful request.
    Field aliases match the document shape the web client reads.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    role: str
    type: str
    level: str
    techstack: List[str] = Field(default_factory=list)
    questions: List[str] = Field(default_factory=list)
    user_id: str = Field(alias="userId")
    finalized: bool = True
    cover_image: str = Field(alias="coverImage")
    created_at: str = Field(alias="createdAt", description="ISO-8601 creation timestamp.")
