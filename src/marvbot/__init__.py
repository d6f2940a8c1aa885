"""Marv - a sarcastic GroupMe bot backed by a text-completion model.

The bot polls a GroupMe group for its newest message and, when a message
contains the trigger word, asks the completion model for a reply and posts
it back to the group.

Components:
- main_bot: process entry point
- bot: poll loop and trigger handling
- groupme: GroupMe HTTP API integration
- llm: completion client and prompt template
"""
