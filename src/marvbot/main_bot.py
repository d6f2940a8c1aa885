"""Process entry point: run the poll loop against one GroupMe group.

Reads settings from CHATBOT_* environment variables, .env or chatbot.yaml,
then polls until interrupted (SIGINT/SIGTERM) or a remote call fails with
exit_on_error enabled.

Usage:
    python -m marvbot.main_bot
"""

import signal
import sys

from pydantic import ValidationError

from .bot.loop import PollLoop
from .config import get_settings
from .groupme.client import GroupMeClient, GroupMeError
from .llm.client import CompletionClient, CompletionError
from .log import get_logger, setup_logging

logger = get_logger("bot")


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging("INFO")
        logger.error(f"Invalid configuration:\n{e}")
        return 1

    setup_logging(settings.log_level)

    chat = GroupMeClient(settings)
    completer = CompletionClient(settings)
    loop = PollLoop(chat, completer, settings)

    def handle_signal(signum, frame):
        logger.info("Stopping bot...")
        loop.stop()

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    logger.info(f"Bot started as '{settings.chatbot_name}', trigger '{settings.trigger_word}'")
    try:
        loop.run()
    except (GroupMeError, CompletionError):
        return 1
    finally:
        chat.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
