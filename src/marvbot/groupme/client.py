"""GroupMe HTTP API wrapper.

Reads the newest message of a group and posts messages back to it. Every
failure is surfaced as GroupMeError; whether that stops the bot is the poll
loop's decision.
"""

import time
from typing import Optional, Tuple

import httpx
from pydantic import ValidationError
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..config import Settings
from ..log import get_logger
from ..schemas.group import Group, GroupSnapshot

logger = get_logger("groupme_client")


class GroupMeError(Exception):
    """A GroupMe call failed in transport, status or decoding."""


def has_new_message(previous: GroupSnapshot, current: GroupSnapshot) -> bool:
    """
    True if `current` holds a message newer than `previous`.
    GroupMe ids are compared as strings, exactly as the API hands them out.
    """
    return current.last_message_id > previous.last_message_id


class GroupMeClient:
    def __init__(self, settings: Settings, http: Optional[httpx.Client] = None):
        self.group_id = settings.group_id
        self.max_attempts = settings.http_max_attempts
        self.http = http or httpx.Client(
            base_url=settings.api_root,
            timeout=settings.http_timeout,
        )
        self._params = {"token": settings.token}

    def close(self):
        self.http.close()

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )
        try:
            for attempt in retrying:
                with attempt:
                    if attempt.retry_state.attempt_number > 1:
                        logger.warning(f"Retrying {method} {path} (attempt {attempt.retry_state.attempt_number})")
                    resp = self.http.request(method, path, params=self._params, **kwargs)
                    resp.raise_for_status()
                    return resp
        except httpx.HTTPStatusError as e:
            raise GroupMeError(f"{method} {path} returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise GroupMeError(f"{method} {path} failed: {e}") from e

    def fetch_latest(self) -> GroupSnapshot:
        """
        Fetch the group and reduce it to a snapshot of its newest message.
        Raises GroupMeError if the body is not a group envelope.
        """
        resp = self._send("GET", f"/groups/{self.group_id}")
        try:
            group = Group.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise GroupMeError(f"Malformed group response: {e}") from e
        return GroupSnapshot.from_group(group)

    def check_for_new(self, last_seen: GroupSnapshot) -> Tuple[bool, GroupSnapshot]:
        current = self.fetch_latest()
        return has_new_message(last_seen, current), current

    def post_message(self, text: str):
        """
        Post `text` to the group. source_guid is the nanosecond clock so two
        posts never collide; the response body is not inspected.
        """
        body = {
            "message": {
                "source_guid": str(time.time_ns()),
                "text": text,
            }
        }
        self._send("POST", f"/groups/{self.group_id}/messages", json=body)
        logger.info(f"Posted reply to group {self.group_id} ({len(text)} chars)")
