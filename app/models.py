from __future__ import annotations

import uuid
from typing import List

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class InterviewRow(SQLModel, table=True):
    __tablename__ = "interviews"

    id: str = Field(default_factory=lambda: uuid.uuid4().hex, primary_key=True)
    role: str
    type: str
    level: str
    techstack: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    questions: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    user_id: str = Field(index=True)
    finalized: bool = Field(default=True)
    cover_image: str
    created_at: str  # ISO-8601, stored as written by the record builder
