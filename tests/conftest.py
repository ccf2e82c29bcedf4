import pytest

from messagekit.config import get_config
from messagekit.core.messages import MessageCatalog, Messages


@pytest.fixture
def sample_messages() -> Messages:
    return {
        "nav": {
            "home": "Home",
            "settings": "Settings",
        },
        "quiz": {
            "title": "Quiz",
            "progress": "Question {{current}} of {{total}}",
            "result": {
                "passed": "Well done, {{name}}!",
            },
        },
        "greeting": "Hello {{name}}!",
    }


@pytest.fixture
def sample_catalog(sample_messages: Messages) -> MessageCatalog:
    return MessageCatalog.from_dict(sample_messages)


@pytest.fixture
def fresh_config():
    get_config.cache_clear()
    yield
    get_config.cache_clear()
