from typing import Mapping, TypeAlias, Union

"""
Example:
{
    "nav": {
        "home": "Home",
        "greeting": "Hello {{name}}!",
    },
    "title": "Quiz",
}
"""

# a leaf is a translation string, anything else is a namespace
Messages: TypeAlias = Mapping[str, Union[str, "Messages"]]

Scalar: TypeAlias = str | int | float | bool | None
Variables: TypeAlias = Mapping[str, Scalar]
