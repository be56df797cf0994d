from enum import Enum
from typing import List

from pydantic import BaseModel, Field


OPTION_LABELS = ("A", "B", "C", "D")


class Topic(str, Enum):
    HTML = "HTML"
    CSS = "CSS"
    JAVASCRIPT = "JavaScript"
    REACT = "React"
    NODE_JS = "Node.js"
    EXPRESS = "Express"
    DATABASES = "Databases"
    APIS = "APIs"
    AUTHENTICATION = "Authentication"
    FRONTEND = "Frontend"
    BACKEND = "Backend"
    FULL_STACK = "Full Stack"


class ParsedQuiz(BaseModel):
    question: str = Field(..., min_length=1)
    options: List[str] = Field(..., min_length=4, max_length=4)
    correct_index: int = Field(..., ge=0, le=3)

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]

    @property
    def explanation(self) -> str:
        return f"✅ Correct answer: {self.correct_option}"
