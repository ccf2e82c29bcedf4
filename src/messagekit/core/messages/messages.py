import copy
import logging
from collections.abc import Mapping
from typing import Annotated, Any, Iterator, Union

from pydantic import Strict, TypeAdapter, ValidationError
from typing_extensions import TypeAliasType

from .exceptions import ValidationException
from .types import Messages

__all__ = ["resolve", "MessageCatalog"]

logger = logging.getLogger(__name__)

Leaf = Annotated[str, Strict()]
MessagesTree = TypeAliasType(
    "MessagesTree", "dict[Leaf, Union[Leaf, MessagesTree]]"  # type: ignore
)

_tree_adapter: TypeAdapter[dict[str, Any]] = TypeAdapter(MessagesTree)


def resolve(messages: Messages, key_path: str) -> str | None:
    """Resolve a dot-separated key path to a leaf translation.

    Example:
        resolve({"nav": {"home": "Home"}}, "nav.home") returns "Home"

    Args:
        messages (Messages): The messages tree.
        key_path (str): Dot-separated path, e.g. "nav.home".

    Returns:
        str | None: The leaf string, or None when the path does not end on a leaf.
    """
    current: Messages | str | None = messages
    for segment in key_path.split("."):
        match current:
            case Mapping():
                current = current.get(segment)
            case _:
                return None
    return current if isinstance(current, str) else None


class MessageCatalog:
    def __init__(self, messages: dict[str, Any]) -> None:
        self.messages = messages

    @classmethod
    def from_dict(cls: type["MessageCatalog"], data: Messages) -> "MessageCatalog":
        messages = cls.validate(data)
        catalog = cls(messages=messages)
        logger.debug("Message catalog created, %d keys", len(list(catalog.keys())))
        return catalog

    @staticmethod
    def validate(data: Messages) -> dict[str, Any]:
        try:
            return _tree_adapter.validate_python(data)
        except ValidationError as e:
            raise ValidationException("Invalid message catalog,", e.errors()) from e

    def resolve(self, key_path: str) -> str | None:
        return resolve(self.messages, key_path)

    def keys(self) -> Iterator[str]:
        """Yield the key path of every leaf, depth first."""
        yield from _leaf_paths(self.messages)

    def dump(self) -> dict[str, Any]:
        return copy.deepcopy(self.messages)

    def __contains__(self, key_path: object) -> bool:
        return isinstance(key_path, str) and self.resolve(key_path) is not None


def _leaf_paths(messages: Messages, prefix: str = "") -> Iterator[str]:
    for key, value in messages.items():
        path = f"{prefix}{key}"
        if isinstance(value, str):
            yield path
        else:
            yield from _leaf_paths(value, prefix=f"{path}.")
