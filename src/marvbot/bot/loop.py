"""The poll loop: watch one group, answer triggered messages.

The newest snapshot seen so far lives only in PollLoop.run(); poll() takes it
and hands back the newer one, if any.
"""

import time
from typing import Callable, Optional

from ..config import Settings
from ..groupme.client import GroupMeClient, GroupMeError
from ..llm.client import CompletionClient, CompletionError
from ..log import get_logger
from ..schemas.group import GroupSnapshot
from .trigger import has_trigger, is_self_message, strip_trigger

logger = get_logger("poll_loop")


def build_reply(snapshot: GroupSnapshot, settings: Settings, completer: CompletionClient) -> Optional[str]:
    """
    Decide whether `snapshot`'s message deserves an answer and produce it.
    Returns the trimmed reply, or None when the message is ignored.
    """
    if is_self_message(snapshot.sender, settings.chatbot_name):
        logger.debug(f"Ignoring own message {snapshot.last_message_id}")
        return None

    if not has_trigger(snapshot.text, settings.trigger_word):
        logger.debug(f"No trigger in message {snapshot.last_message_id}")
        return None

    user_prompt = strip_trigger(snapshot.text, settings.trigger_word)
    logger.info(f"Trigger from {snapshot.sender} in message {snapshot.last_message_id}")
    return completer.complete(user_prompt).strip()


class PollLoop:
    def __init__(
        self,
        chat: GroupMeClient,
        completer: CompletionClient,
        settings: Settings,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.chat = chat
        self.completer = completer
        self.settings = settings
        self.sleep = sleep
        self.running = False

    def stop(self):
        self.running = False

    def _on_failure(self, what: str):
        # Called from inside an except block; bare raise re-raises the active error
        if self.settings.exit_on_error:
            logger.exception(f"{what}, stopping")
            raise
        logger.exception(f"{what}, continuing")

    def respond(self, snapshot: GroupSnapshot):
        reply = build_reply(snapshot, self.settings, self.completer)
        if reply is None:
            return
        if not reply:
            logger.warning(f"Completion for message {snapshot.last_message_id} was blank, not posting")
            return
        self.chat.post_message(reply)

    def poll(self, last_seen: GroupSnapshot) -> Optional[GroupSnapshot]:
        """Return the newer snapshot, or sleep and return None if nothing changed."""
        is_new, current = self.chat.check_for_new(last_seen)
        if not is_new:
            self.sleep(self.settings.poll_interval)
            return None
        return current

    def run(self):
        """
        Poll until stop() is called. With exit_on_error the first remote
        failure is re-raised; otherwise it is logged and polling resumes.
        A new message becomes the baseline before it is answered, so a
        failed answer is never retried.
        """
        self.running = True
        try:
            last_seen = self.chat.fetch_latest()
        except GroupMeError:
            # No baseline to compare against, so this is fatal regardless of exit_on_error
            logger.exception("Fetching the starting snapshot failed, stopping")
            raise
        logger.info(f"Watching group {last_seen.group_id} from message {last_seen.last_message_id or '<none>'}")

        while self.running:
            try:
                current = self.poll(last_seen)
            except GroupMeError:
                self._on_failure("Polling GroupMe failed")
                self.sleep(self.settings.poll_interval)
                continue
            if current is None:
                continue

            last_seen = current
            try:
                self.respond(current)
            except (GroupMeError, CompletionError):
                self._on_failure(f"Answering message {current.last_message_id} failed")
