"""Error types raised before normalization starts.

Per-item field gaps are never errors; only a failed fetch or an unparseable
document aborts a run.
"""


class FeedError(Exception):
    """Base class for failures that abort the pipeline.

    Attributes:
        user_message: Short text safe to show on the rendered page.
    """

    user_message = "Unable to load feed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.user_message)


class FetchError(FeedError):
    """Transport failed, timed out, or returned an empty body."""

    user_message = "Unable to fetch feed."


class ParseError(FeedError):
    """The fetched document is not well-formed XML."""

    user_message = "Invalid feed format."


__all__ = ["FeedError", "FetchError", "ParseError"]
