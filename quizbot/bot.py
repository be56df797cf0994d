import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from quizbot.config import Settings
from quizbot.dispatcher import QuizDispatcher
from quizbot.services import GroqService


logger = logging.getLogger(__name__)

QUIZ_JOB_NAME = "scheduled_quiz"


def welcome_text(interval_minutes: int) -> str:
    every = "minute" if interval_minutes == 1 else f"{interval_minutes} minutes"
    return (
        f"👋 Welcome! You'll receive a Web Development quiz every {every}. "
        "Type /question to get one immediately."
    )


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Start command handler"""
    logger.info(f"/start from: {update.effective_chat.id}")
    settings: Settings = context.bot_data["settings"]
    await update.effective_message.reply_text(welcome_text(settings.quiz_interval_minutes))


async def question_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Question command handler"""
    chat_id = update.effective_chat.id
    logger.info(f"/question from: {chat_id}")
    dispatcher: QuizDispatcher = context.bot_data["dispatcher"]
    await dispatcher.send_quiz(chat_id)


async def scheduled_quiz(context: ContextTypes.DEFAULT_TYPE):
    """Repeating job: post a quiz to the default chat."""
    chat_id = context.job.chat_id
    logger.info(f"Scheduled quiz for chat ID: {chat_id}")
    dispatcher: QuizDispatcher = context.bot_data["dispatcher"]
    await dispatcher.send_quiz(chat_id)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    logger.error("Unhandled error while processing an update or job", exc_info=context.error)


async def close_generator(application: Application):
    """post_shutdown hook: release the LLM client's connection pool."""
    dispatcher: QuizDispatcher = application.bot_data["dispatcher"]
    close = getattr(dispatcher.generator, "close", None)
    if close is not None:
        await close()
    logger.info("Quiz generator closed.")


def build_application(settings: Settings, generator=None) -> Application:
    """Create the bot application with its command handlers and the repeating quiz job."""
    application = (
        Application.builder()
        .token(settings.telegram_token)
        .post_shutdown(close_generator)
        .build()
    )

    generator = generator or GroqService(api_key=settings.groq_api_key, model=settings.groq_model)
    application.bot_data["settings"] = settings
    application.bot_data["dispatcher"] = QuizDispatcher(generator, application.bot)

    application.add_handler(CommandHandler("start", start, block=False))
    application.add_handler(CommandHandler("question", question_command, block=False))
    application.add_error_handler(error_handler)

    interval = settings.quiz_interval_minutes * 60
    application.job_queue.run_repeating(
        scheduled_quiz,
        interval=interval,
        first=interval,
        chat_id=settings.chat_id,
        name=QUIZ_JOB_NAME,
        job_kwargs={"max_instances": 3}
    )

    return application
