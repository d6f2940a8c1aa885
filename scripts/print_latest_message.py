#!/usr/bin/env python3
"""
Utility: print the newest message the bot would see in its group.

Usage:
  python scripts/print_latest_message.py [--raw]

Shows the snapshot the poll loop compares against, whether the trigger is
present and the prompt the model would receive. Nothing is posted.
"""
from __future__ import annotations
import argparse
import json
import os
import sys

# Add project src to path if not already available
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from marvbot.bot.trigger import has_trigger, is_self_message, strip_trigger
from marvbot.config import get_settings
from marvbot.groupme.client import GroupMeClient
from marvbot.llm.prompts import build_prompt


def main():
    p = argparse.ArgumentParser(description="Print the newest GroupMe message seen by the bot")
    p.add_argument("--raw", action="store_true", help="Dump the snapshot as JSON")
    args = p.parse_args()

    settings = get_settings()
    chat = GroupMeClient(settings)
    try:
        snapshot = chat.fetch_latest()
    finally:
        chat.close()

    if args.raw:
        print(json.dumps(snapshot.model_dump(), indent=2))
        return

    print("---")
    print(f"group: {snapshot.group_id} ({snapshot.message_count} messages)")
    print(f"last_message_id: {snapshot.last_message_id}")
    print(f"sender: {snapshot.sender}")
    print("text:")
    print(snapshot.text)
    print("---")
    if is_self_message(snapshot.sender, settings.chatbot_name):
        print("Sent by the bot itself, would be ignored.")
    elif not has_trigger(snapshot.text, settings.trigger_word):
        print(f"No '{settings.trigger_word}' in text, would be ignored.")
    else:
        print("Prompt that would be sent:")
        print(build_prompt(strip_trigger(snapshot.text, settings.trigger_word)))


if __name__ == '__main__':
    main()
