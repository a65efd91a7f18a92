"""Shared exception types for the extractor."""


class InvalidInputError(Exception):
    """Raised when a request carries no usable paper text.

    Missing, non-string, or whitespace-only payloads are rejected before they
    reach the extraction core.
    """

    def __init__(self, details: str = "Please provide research paper text to analyze.") -> None:
        self.details = details
        super().__init__(details)


class SourceError(Exception):
    """Raised when input text cannot be loaded from a file, stdin or URL.

    Carries *source* (a path or URL) and a human-readable *details* string.
    """

    def __init__(self, source: str, details: str) -> None:
        self.source = source
        self.details = details
        super().__init__(f"Could not read {source}: {details}")
