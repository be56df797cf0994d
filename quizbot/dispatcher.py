import logging
from typing import Optional, Union

from telegram import Message, Poll
from telegram.error import TelegramError

from quizbot.exceptions import DeliveryError, FormatError, GenerationError
from quizbot.models import ParsedQuiz, Topic
from quizbot.parser import parse_quiz
from quizbot.services import PLACEHOLDER_TEXT


logger = logging.getLogger(__name__)

ChatId = Union[int, str]


class QuizDispatcher:
    """Generates a quiz and delivers it to a chat as a poll, or as text if that fails."""

    def __init__(self, generator, bot):
        self.generator = generator
        self.bot = bot

    async def _generate_draft(self, topic: Topic) -> str:
        try:
            return await self.generator.generate_quiz_text(topic)
        except GenerationError as e:
            logger.error(f"Quiz generation failed: {e}")
            return PLACEHOLDER_TEXT

    async def _send_poll(self, chat_id: ChatId, quiz: ParsedQuiz) -> Message:
        try:
            return await self.bot.send_poll(
                chat_id=chat_id,
                question=quiz.question,
                options=quiz.options,
                type=Poll.QUIZ,
                correct_option_id=quiz.correct_index,
                is_anonymous=False,
                explanation=quiz.explanation
            )
        except TelegramError as e:
            raise DeliveryError(f"Telegram rejected the quiz poll: {e}") from e

    async def send_quiz(self, chat_id: ChatId, topic: Optional[Topic] = None) -> Message:
        """
        Send exactly one message to ``chat_id``: a quiz poll when the draft
        parses and Telegram accepts it, otherwise the raw draft as plain text.

        Errors from the plain-text fallback propagate to the caller.
        """
        logger.info(f"Generating quiz for chat ID: {chat_id}...")
        topic = topic or self.generator.pick_topic()
        draft = await self._generate_draft(topic)

        try:
            quiz = parse_quiz(draft)
            message = await self._send_poll(chat_id, quiz)
        except (FormatError, DeliveryError) as e:
            logger.warning(f"Failed to send quiz poll, falling back to text: {e}")
            return await self.bot.send_message(chat_id=chat_id, text=draft)

        logger.info(f"Quiz poll sent to chat ID: {chat_id}")
        return message
