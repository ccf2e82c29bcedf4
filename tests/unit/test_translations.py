import logging

import pytest

from messagekit.core.messages import MessageCatalog
from messagekit.translations import Translator


@pytest.fixture
def translator(sample_catalog: MessageCatalog) -> Translator:
    return Translator(catalog=sample_catalog, locale="en")


def test_translate(translator: Translator):
    assert translator("nav.home") == "Home"


def test_translate_with_vars(translator: Translator):
    assert translator("greeting", {"name": "Ada"}) == "Hello Ada!"


def test_translate_with_kwargs(translator: Translator):
    assert translator("quiz.progress", current=2, total=10) == "Question 2 of 10"


def test_kwargs_override_vars(translator: Translator):
    result = translator("quiz.progress", {"current": 1, "total": 3}, current=2)
    assert result == "Question 2 of 3"


def test_translate_without_vars_keeps_placeholders(translator: Translator):
    assert translator("greeting") == "Hello {{name}}!"


def test_missing_key_returns_key_path(translator: Translator, caplog):
    with caplog.at_level(logging.DEBUG, logger="messagekit.translations"):
        assert translator("nav.missing") == "nav.missing"
    assert "nav.missing" in caplog.text


def test_namespace_key_returns_key_path(translator: Translator):
    assert translator("quiz.result") == "quiz.result"


def test_default_locale(
    sample_catalog: MessageCatalog, monkeypatch, fresh_config
):
    monkeypatch.delenv("DEFAULT_LOCALE", raising=False)
    assert Translator(catalog=sample_catalog).locale == "en"


def test_default_locale_from_env(
    sample_catalog: MessageCatalog, monkeypatch, fresh_config
):
    monkeypatch.setenv("DEFAULT_LOCALE", "fr")
    assert Translator(catalog=sample_catalog).locale == "fr"


@pytest.mark.parametrize("locale", ["ru", "EN", "de-DE"])
def test_unsupported_locale(sample_catalog: MessageCatalog, locale: str):
    with pytest.raises(ValueError):
        Translator(catalog=sample_catalog, locale=locale)  # type: ignore


def test_placeholders_named_like_parameters():
    catalog = MessageCatalog.from_dict({"debug": "{{key_path}} = {{vars}}"})
    translator = Translator(catalog=catalog, locale="en")
    assert translator("debug", key_path="nav.home", vars="none") == "nav.home = none"
