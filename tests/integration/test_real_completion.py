import pytest

from marvbot.config import Settings
from marvbot.llm.client import CompletionClient

pytestmark = pytest.mark.integration


@pytest.mark.timeout(60)
def test_real_completion_answers(allow_integration, openai_api_key):
    """
    WHY: Verify the configured completion model still accepts our request shape.
    """
    if not allow_integration:
        pytest.skip("Set RUN_INTEGRATION_TESTS=1 to run integration tests")
    if not openai_api_key:
        pytest.skip("OPENAI_API_KEY not set")

    settings = Settings(
        _env_file=None,
        token="unused",
        group_id="unused",
        gpt_token=openai_api_key,
        chatbot_name="Marv",
        trigger_word="!marv",
    )
    client = CompletionClient(settings)

    answer = client.complete("How many pounds are in a kilogram?")

    assert isinstance(answer, str)
    assert answer.strip()
