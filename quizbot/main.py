import logging
import sys

from dotenv import load_dotenv
from telegram import Update

from quizbot.bot import build_application
from quizbot.config import load_settings
from quizbot.exceptions import ConfigError


logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=logging.INFO
    )
    # httpx logs request URLs, which contain the bot token
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main():
    """Start the bot"""
    load_dotenv()
    configure_logging()

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error(f"❌ {e}. Please check your .env file.")
        sys.exit(1)

    logger.info(f"Starting bot with token: {settings.telegram_token[:10]}...")
    logger.info(f"Default chat ID: {settings.chat_id}")
    logger.info(f"Quiz interval: every {settings.quiz_interval_minutes} minute(s)")

    application = build_application(settings)

    logger.info("Bot started successfully!")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
