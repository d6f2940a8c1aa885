def is_self_message(sender: str, chatbot_name: str) -> bool:
    # Matches on substring so "MarvBot" and "Marv (bot)" both count as us
    return chatbot_name in sender


def has_trigger(text: str, trigger_word: str) -> bool:
    return trigger_word in text


def strip_trigger(text: str, trigger_word: str) -> str:
    """Remove every occurrence of the trigger, leaving surrounding spacing alone."""
    return text.replace(trigger_word, "")
