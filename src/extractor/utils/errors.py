"""Typed exceptions for category lookup failures."""


class ExtractorError(Exception):
    """Base class for errors raised by the extractor package."""


class UnsupportedCategoryError(ExtractorError, ValueError):
    """Raised when a category name is not in the registered set.

    The offending name is kept on :attr:`category` and the operation that
    attempted the lookup on :attr:`operation`.
    """

    def __init__(self, category: object, operation: str = "lookup") -> None:
        self.category = category
        self.operation = operation
        super().__init__(f"Unsupported {operation} type: '{category}'")
