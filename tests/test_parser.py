import pytest

from quizbot.exceptions import FormatError
from quizbot.parser import parse_quiz
from quizbot.services import PLACEHOLDER_TEXT
from tests.conftest import HTML_QUIZ


def test_parses_html_quiz():
    quiz = parse_quiz(HTML_QUIZ)

    assert quiz.question == "What does HTML stand for?"
    assert quiz.options == [
        "HyperText Markup Language",
        "Home Tool Markup Language",
        "Hyperlinks Text Mark Language",
        "None",
    ]
    assert quiz.correct_index == 0
    assert quiz.correct_option == "HyperText Markup Language"
    assert quiz.explanation == "✅ Correct answer: HyperText Markup Language"


@pytest.mark.parametrize("label, index", [("A", 0), ("B", 1), ("C", 2), ("D", 3), ("c", 2)])
def test_answer_label_maps_to_index(label, index):
    text = HTML_QUIZ.replace("Answer: A", f"Answer: {label}")
    assert parse_quiz(text).correct_index == index


def test_tolerates_padding_blank_lines_and_surrounding_text():
    text = (
        "Sure! Here is your quiz:\n\n"
        "   Question:   Which tag makes a link?  \n"
        "\n"
        "  A) <a>\r\n"
        "B) <link>\n"
        "C) <href>\n"
        "D) <url>\n\n"
        "ANSWER:  a  \n"
        "Hope that helps."
    )
    quiz = parse_quiz(text)

    assert quiz.question == "Which tag makes a link?"
    assert quiz.options == ["<a>", "<link>", "<href>", "<url>"]
    assert quiz.correct_index == 0


def test_first_matching_line_wins():
    text = HTML_QUIZ + "\nQuestion: Another?\nA) Other\nAnswer: B"
    quiz = parse_quiz(text)

    assert quiz.question == "What does HTML stand for?"
    assert quiz.options[0] == "HyperText Markup Language"
    assert quiz.correct_index == 0


def test_option_keeps_text_after_prefix():
    text = HTML_QUIZ.replace("D) None", "D) Both A) and B)")
    assert parse_quiz(text).options[3] == "Both A) and B)"


@pytest.mark.parametrize(
    "missing",
    [
        "Question: What does HTML stand for?",
        "A) HyperText Markup Language",
        "B) Home Tool Markup Language",
        "C) Hyperlinks Text Mark Language",
        "D) None",
        "Answer: A",
    ],
)
def test_missing_line_fails(missing):
    text = "\n".join(line for line in HTML_QUIZ.split("\n") if line != missing)
    with pytest.raises(FormatError):
        parse_quiz(text)


@pytest.mark.parametrize("answer", ["Answer: E", "Answer:", "Answer:   ", "Answer: AB", "Answer: 1"])
def test_invalid_answer_label_fails(answer):
    with pytest.raises(FormatError):
        parse_quiz(HTML_QUIZ.replace("Answer: A", answer))


def test_lowercase_question_prefix_fails():
    text = HTML_QUIZ.replace("Question:", "question:")
    with pytest.raises(FormatError):
        parse_quiz(text)


def test_empty_question_fails():
    with pytest.raises(FormatError):
        parse_quiz(HTML_QUIZ.replace("Question: What does HTML stand for?", "Question:   "))


@pytest.mark.parametrize("text", ["", "Sorry, I can't help with that.", PLACEHOLDER_TEXT, "\n\n  \n"])
def test_unstructured_text_fails(text):
    with pytest.raises(FormatError):
        parse_quiz(text)


def test_parsing_is_idempotent():
    assert parse_quiz(HTML_QUIZ) == parse_quiz(HTML_QUIZ)
