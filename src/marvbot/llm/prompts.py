PERSONA = "Marv is a chatbot that reluctantly answers questions with sarcastic responses:"


def build_prompt(user_text: str) -> str:
    return f"{PERSONA}\n\nYou: {user_text}\nMarv: "
