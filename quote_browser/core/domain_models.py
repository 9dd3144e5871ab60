from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# --- Enums ---


class ScreenStatus(str, Enum):
    """Lifecycle of the quote screen."""

    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


# --- Domain Models ---


class Quote(BaseModel):
    """
    A single quote as delivered by the remote endpoint.

    The endpoint calls the quote text `quote`; the model exposes it as `text`
    and accepts both names on input.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    text: str = Field(validation_alias=AliasChoices("text", "quote"))
    author: str


class QuoteResponse(BaseModel):
    """Envelope returned by `GET /quotes`."""

    model_config = ConfigDict(frozen=True)

    quotes: tuple[Quote, ...] = ()
    total: int | None = Field(default=None, description="Size of the full remote collection")
    skip: int = 0
    limit: int | None = None

    @property
    def is_truncated(self) -> bool:
        """True if the server reports more quotes than it delivered."""
        return self.total is not None and self.total > self.skip + len(self.quotes)


class PageEllipsis:
    """Marker for a run of hidden page numbers inside a page window."""

    _instance: "PageEllipsis | None" = None

    def __new__(cls) -> "PageEllipsis":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ELLIPSIS"

    def __str__(self) -> str:
        return "..."


ELLIPSIS = PageEllipsis()

PageWindowItem = int | PageEllipsis
