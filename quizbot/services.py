import logging
import random
from typing import Optional

from groq import AsyncGroq

from quizbot.config import DEFAULT_GROQ_MODEL
from quizbot.exceptions import GenerationError
from quizbot.models import Topic


logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "❌ Could not generate quiz. Please try again later."


class GroqService:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_GROQ_MODEL,
        client: Optional[AsyncGroq] = None,
        rng: Optional[random.Random] = None,
    ):
        # single attempt per quiz, the SDK retries twice by default
        self.client = client or AsyncGroq(api_key=api_key, max_retries=0)
        self.model = model
        self.rng = rng or random.Random()

    def pick_topic(self) -> Topic:
        return self.rng.choice(list(Topic))

    @staticmethod
    def build_prompt(topic: Topic) -> str:
        topic_name = Topic(topic).value
        return f"""Generate a Web Development multiple choice question related to {topic_name} with exactly 4 options (A, B, C, D).
Clearly specify the correct answer using the format below:
Output format:
Question: <your question here>
A) <option A>
B) <option B>
C) <option C>
D) <option D>
Answer: <Correct Option Letter>"""

    async def generate_quiz_text(self, topic: Topic) -> str:
        """
        Ask the model for one quiz question about ``topic``.

        Returns the raw reply text. Raises GenerationError if the API call
        fails or the reply is empty. The call is never retried.
        """
        try:
            topic = Topic(topic)
        except ValueError as e:
            raise GenerationError(f"Unknown topic: {topic!r}") from e

        logger.info(f"Requesting quiz on {topic.value} from Groq...")

        try:
            chat_completion = await self.client.chat.completions.create(
                messages=[
                    {
                        "role": "user",
                        "content": self.build_prompt(topic)
                    }
                ],
                model=self.model,
                temperature=0.9,
                max_tokens=512,
                top_p=0.95
            )
        except Exception as e:
            raise GenerationError(f"Groq request failed: {e}") from e

        choices = chat_completion.choices or []
        response_text = (choices[0].message.content or "").strip() if choices else ""
        if not response_text:
            raise GenerationError("Empty response from Groq.")

        logger.info("Quiz received.")
        return response_text

    async def close(self):
        await self.client.close()
