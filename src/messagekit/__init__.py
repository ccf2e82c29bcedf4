# flake8: noqa
from .core.messages import MessageCatalog, Messages, Variables, interpolate, resolve
from .core.messages.exceptions import MessagesException, ValidationException
from .locales import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    Locale,
    best_locale_from_accept_language,
    is_locale,
    normalize_locale,
)
from .translations import TFunction, Translator

__version__ = "0.1.0"
