"""
Pydantic models for the API.

Request/response models shared across route modules.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class QAPairIn(BaseModel):
    """One question with its markdown answer"""
    question: str = Field(..., description="Question text")
    answer: str = Field(default="", description="Answer markdown; empty while generation is pending")

    @field_validator("question")
    @classmethod
    def _question_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question must not be empty")
        return value.strip()


class ExportRequest(BaseModel):
    """Request to export a transcript"""
    title: Optional[str] = Field(default=None, description="Document title; derived from the first question when omitted")
    qa_pairs: List[QAPairIn] = Field(default_factory=list, description="Question/answer pairs in order")


class PagePreview(BaseModel):
    """Lines placed on one page"""
    index: int
    lines: List[str]
    footer: List[str]


class ExportPreview(BaseModel):
    """Page plan for a transcript"""
    title: str
    filename: str
    page_count: int
    pages: List[PagePreview]
