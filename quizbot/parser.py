import re
from typing import List, Optional

from pydantic import ValidationError

from quizbot.exceptions import FormatError
from quizbot.models import OPTION_LABELS, ParsedQuiz


_ANSWER_RE = re.compile(r"^answer:", re.IGNORECASE)


def _first(lines: List[str], predicate) -> Optional[str]:
    return next((line for line in lines if predicate(line)), None)


def parse_quiz(text: str) -> ParsedQuiz:
    """
    Extract a ParsedQuiz from model output of the form::

        Question: <question>
        A) <option>
        B) <option>
        C) <option>
        D) <option>
        Answer: <letter>

    Lines may appear in any order and surrounding text is ignored; the first
    matching line wins. Raises FormatError if anything is missing or invalid,
    never returns a partial quiz.
    """
    lines = [line.strip() for line in (text or "").split("\n")]
    lines = [line for line in lines if line]

    question_line = _first(lines, lambda l: l.lower().startswith("question:"))
    if question_line is None or "Question:" not in question_line:
        raise FormatError("Question line not found.")
    question = question_line.split("Question:", 1)[1].strip()

    options = []
    for label in OPTION_LABELS:
        prefix = f"{label})"
        option_line = _first(lines, lambda l: l.startswith(prefix))
        if option_line is None:
            raise FormatError(f"Option {label} not found.")
        options.append(option_line[len(prefix):].strip())

    answer_line = _first(lines, _ANSWER_RE.match)
    if answer_line is None:
        raise FormatError("Answer line not found.")
    correct_label = answer_line.split(":")[1].strip().upper()
    if correct_label not in OPTION_LABELS:
        raise FormatError(f"Invalid answer label: {correct_label!r}")

    try:
        return ParsedQuiz(
            question=question,
            options=options,
            correct_index=OPTION_LABELS.index(correct_label)
        )
    except ValidationError as e:
        raise FormatError(f"Quiz format is invalid: {e}") from e
