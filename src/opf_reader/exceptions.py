"""Errors raised while reading package documents."""


class OpfError(Exception):
    """Base class for all package document errors."""


class InvalidInputError(OpfError, TypeError):
    """Raised when the data is neither XML text nor a parsed XML tree."""

    def __init__(self, data: object):
        self.data_type = type(data).__name__
        super().__init__(f"Invalid data type for package document: {self.data_type}")


class MalformedXmlError(OpfError, ValueError):
    """Raised when the XML parser rejects the document text."""


class DanglingReferenceError(OpfError):
    """Raised when a spine itemref points at an id missing from the manifest."""

    def __init__(self, idref: str):
        self.idref = idref
        super().__init__(f"Spine itemref references unknown manifest id: {idref!r}")


class DuplicateKeyError(OpfError):
    """Raised when two manifest items share the same id."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Duplicate manifest item id: {item_id!r}")


class ItemNotFoundError(OpfError, KeyError):
    """Raised when a manifest lookup misses."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Manifest item not found: {item_id!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class ResourceNotFoundError(OpfError, FileNotFoundError):
    """Raised by resource providers when a path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Resource not found: {path!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class ContentUnavailableError(OpfError):
    """Raised when an item's content cannot be retrieved."""

    def __init__(self, href: str, reason: str):
        self.href = href
        self.reason = reason
        super().__init__(f"Content unavailable for {href!r}: {reason}")
