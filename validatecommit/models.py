"""Shared models for validate-commit."""
from typing import List, Optional
from dataclasses import dataclass
from enum import Enum
from pydantic import BaseModel, Field

class CommitType(str, Enum):
    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    CHORE = "chore"

@dataclass(frozen=True)
class Span:
    """Where in the input a fault occurred, used to draw the caret line."""
    line: str
    column: int
    line_number: Optional[int] = None

class CommitHeader(BaseModel):
    commit_type: CommitType
    scope: Optional[str] = None
    subject: str

    @property
    def subject_offset(self) -> int:
        """Column at which the subject starts in the header line."""
        offset = len(self.commit_type.value) + 2
        if self.scope is not None:
            offset += len(self.scope) + 2
        return offset

    def __str__(self) -> str:
        if self.scope is not None:
            return f"{self.commit_type.value}({self.scope}): {self.subject}"
        return f"{self.commit_type.value}: {self.subject}"

class CommitMessage(BaseModel):
    header: CommitHeader
    lines: List[str] = Field(default_factory=list, description="Surviving non-comment lines")
