from unittest.mock import AsyncMock, Mock

import pytest

from quizbot.config import Settings


HTML_QUIZ = (
    "Question: What does HTML stand for?\n"
    "A) HyperText Markup Language\n"
    "B) Home Tool Markup Language\n"
    "C) Hyperlinks Text Mark Language\n"
    "D) None\n"
    "Answer: A"
)


@pytest.fixture
def settings():
    return Settings(
        telegram_token="123456:TEST-TOKEN",
        groq_api_key="gsk_test",
        chat_id="-100123",
        quiz_interval_minutes=5,
    )


@pytest.fixture
def generator():
    gen = Mock()
    gen.pick_topic.return_value = "HTML"
    gen.generate_quiz_text = AsyncMock(return_value=HTML_QUIZ)
    gen.close = AsyncMock()
    return gen


@pytest.fixture
def fake_bot():
    bot = Mock()
    bot.send_poll = AsyncMock(return_value="poll-message")
    bot.send_message = AsyncMock(return_value="text-message")
    return bot
