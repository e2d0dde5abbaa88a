import pytest

from src.infrastructure.config import GatewayConfig, Settings
from src.services.ai_client import GeminiGateway


VALID_MODEL_OUTPUT = (
    '{"questions":[{"prompt":"What is photosynthesis?","type":"short",'
    '"difficulty":"easy","answer":"...","options":[]}]}'
)


class FakeGateway(GeminiGateway):
    """Gateway that records calls instead of reaching the network."""

    def __init__(self, reply=VALID_MODEL_OUTPUT, api_key="test-key", error=None):
        super().__init__(GatewayConfig(api_key=api_key))
        self.reply = reply
        self.error = error
        self.calls = []

    async def generate(self, model, payload):
        self.calls.append((model, payload))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_gateway():
    """A gateway returning one short, easy question."""
    return FakeGateway()


@pytest.fixture
def test_settings():
    return Settings(
        FLASK_ENV="testing",
        GEMINI_API_KEY="test-key",
        CLIENT_ORIGIN="",
        MAX_QUESTION_COUNT=20,
    )


@pytest.fixture
def app(test_settings, fake_gateway):
    """Create and configure a new app instance backed by the fake gateway."""
    from app import create_app
    app = create_app(settings=test_settings, gateway=fake_gateway)
    app.config.update({"TESTING": True})
    yield app


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()
