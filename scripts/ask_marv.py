from dotenv import load_dotenv
import sys
from marvbot.config import get_settings
from marvbot.llm.client import CompletionClient

def run(question: str):
    print("Loading environment...")
    load_dotenv()
    settings = get_settings()
    client = CompletionClient(settings)

    print(f"Asking {settings.completion_model}: {question}")
    answer = client.complete(question)
    print(f"Marv: {answer.strip()}")

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/ask_marv.py 'your question'")
        sys.exit(2)
    run(" ".join(sys.argv[1:]))
