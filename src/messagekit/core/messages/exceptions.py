class MessagesException(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class ValidationException(MessagesException):
    """
    Raised when a catalog is built from a tree that holds something other
    than string keys, string leaves and nested namespaces.

    `errors` keeps one (key path, reason) pair per rejected entry, the key
    path dot-joined like the ones passed to resolve.
    """

    def __init__(self, message: str, errors: list) -> None:
        self.errors = [
            (".".join(str(part) for part in error["loc"]), error["msg"].strip())
            for error in errors
        ]
        entries = "; ".join(
            f"{key_path or '<root>'}: {reason}" for key_path, reason in self.errors
        )
        super().__init__(f"{message} {len(self.errors)} invalid entries: {entries}")
