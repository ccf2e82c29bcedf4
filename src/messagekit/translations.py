import logging
from typing import Any, Protocol

from messagekit.config import get_config
from messagekit.core.messages import MessageCatalog, Variables, interpolate
from messagekit.locales import Locale, is_locale

logger = logging.getLogger(__name__)


class TFunction(Protocol):
    def __call__(
        self, key_path: str, vars: Variables | None = None, /, **kwargs: Any
    ) -> str: ...


class Translator:
    """Translate key paths with one locale's catalog.

    The locale names the language of the catalog, it does not pick one. A key
    path that does not resolve is shown as is, there is no fallback to another
    locale.

    Example:
        t = Translator(catalog, "de")
        t("quiz.progress", current=2, total=10)
    """

    def __init__(self, catalog: MessageCatalog, locale: Locale | None = None) -> None:
        locale = locale or get_config().DEFAULT_LOCALE
        if not is_locale(locale):
            raise ValueError(f"Unsupported locale: {locale!r}")
        self.catalog = catalog
        self.locale: Locale = locale

    def __call__(
        self, key_path: str, vars: Variables | None = None, /, **kwargs: Any
    ) -> str:
        if kwargs:
            vars = {**(vars or {}), **kwargs}
        template = self.catalog.resolve(key_path)
        if template is None:
            logger.debug(
                "Missing translation for %r in locale %s", key_path, self.locale
            )
            template = key_path
        return interpolate(template, vars)
