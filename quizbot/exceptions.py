class QuizBotError(Exception):
    """Base class for all quiz bot errors."""


class GenerationError(QuizBotError):
    """The LLM call failed or returned an empty reply."""


class FormatError(QuizBotError):
    """Generated text does not follow the Question/A)-D)/Answer layout."""


class DeliveryError(QuizBotError):
    """Telegram rejected the quiz poll."""


class ConfigError(QuizBotError):
    """Mandatory configuration is missing or invalid."""
