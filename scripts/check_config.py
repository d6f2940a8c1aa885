#!/usr/bin/env python3
"""
Quick check that the bot can be configured before starting it.
Loads settings the same way the bot does (CHATBOT_* env, .env, chatbot.yaml)
and prints what it found, with secrets masked.
"""
from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv()

SECRETS = ("token", "gpt_token")


def mask(value: str) -> str:
    return value[:4] + "..." if len(value) > 4 else "***"


def check_config():
    from marvbot.config import Settings

    print("=" * 60)
    print("Marv Configuration Check")
    print("=" * 60)

    try:
        settings = Settings()
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"✗ {field}: {err['msg']}")
        print("=" * 60)
        print("\nAdd the missing keys to chatbot.yaml or .env, e.g.:")
        print("CHATBOT_TOKEN=your-groupme-token")
        print("CHATBOT_GROUP_ID=12345678")
        print("CHATBOT_GPT_TOKEN=sk-your-key")
        print("CHATBOT_CHATBOT_NAME=Marv")
        print("CHATBOT_TRIGGER_WORD=!marv")
        return False

    for name, value in settings.model_dump().items():
        shown = mask(value) if name in SECRETS else value
        print(f"✓ {name}: {shown}")
    print("=" * 60)
    print("\nStart the bot with:")
    print("   python -m marvbot.main_bot")
    return True


if __name__ == "__main__":
    check_config()
