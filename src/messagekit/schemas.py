from pydantic import BaseModel


class LanguageRange(BaseModel):
    """One entry of an Accept-Language header."""

    tag: str
    q: float = 1.0
    idx: int
