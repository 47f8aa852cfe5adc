import pytest
from fastapi.testclient import TestClient

from mention_checker.config import Settings
from mention_checker.models.base import BaseLLMClient
from mention_checker.server import create_app


class FakeClient(BaseLLMClient):
    name = "fake"
    model = "fake-model"

    def __init__(self, text: str = "", error: Exception = None):
        self.text = text
        self.error = error
        self.prompts = []

    async def answer_async(self, prompt: str, temperature: float = 0.0) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.text


RANKED_ANSWER = (
    "Here are the best CRM tools:\n\n"
    "1. **Salesforce:** the market leader, excellent ecosystem.\n"
    "2. **HubSpot CRM:** great for startups.\n"
    "3. **Zoho One:** affordable suite.\n"
)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def make_client(settings):
    def _make(llm_client):
        return TestClient(create_app(settings, llm_client=llm_client))
    return _make
