"""Render module schemas."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

PageFormat = Literal["A4", "Letter", "Legal"]
RenderStage = Literal["launch", "navigate", "export"]

DEFAULT_FORMAT: PageFormat = "A4"
DEFAULT_FILENAME = "download.pdf"

DEFAULT_MARGINS = {
    "top": "20px",
    "right": "10px",
    "bottom": "20px",
    "left": "10px",
}


class PdfMargin(BaseModel):
    """Page margins in CSS units. Each side falls back to its own default."""

    model_config = ConfigDict(frozen=True)

    top: str = DEFAULT_MARGINS["top"]
    right: str = DEFAULT_MARGINS["right"]
    bottom: str = DEFAULT_MARGINS["bottom"]
    left: str = DEFAULT_MARGINS["left"]

    @field_validator("top", "right", "bottom", "left", mode="before")
    @classmethod
    def _default_when_blank(cls, value: Any, info: Any) -> Any:
        if value is None or value == "":
            return DEFAULT_MARGINS[info.field_name]
        return value


class RenderOptions(BaseModel):
    """Everything the renderer needs for one page."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1, description="Page to render")
    format: PageFormat = DEFAULT_FORMAT
    margin: PdfMargin = Field(default_factory=PdfMargin)
    print_background: bool = True
    development_mode: bool = False

    @field_validator("format", mode="before")
    @classmethod
    def _default_format(cls, value: Any) -> Any:
        return value or DEFAULT_FORMAT

    @field_validator("margin", mode="before")
    @classmethod
    def _default_margin(cls, value: Any) -> Any:
        return PdfMargin() if value is None else value

    @field_validator("print_background", mode="before")
    @classmethod
    def _default_print_background(cls, value: Any) -> Any:
        return True if value is None else value

    def pdf_arguments(self) -> dict[str, Any]:
        """Keyword arguments for ``Page.pdf``."""
        return {
            "format": self.format,
            "print_background": self.print_background,
            "margin": self.margin.model_dump(),
        }


class RequestData(BaseModel):
    """What a data fetcher yields for one request."""

    url: str
    filename: str = DEFAULT_FILENAME

    @field_validator("filename", mode="before")
    @classmethod
    def _default_filename(cls, value: Any) -> Any:
        return value or DEFAULT_FILENAME


class RenderResult(BaseModel):
    """Outcome of a render: either a document or the stage that failed."""

    success: bool
    document: bytes | None = None
    error: str | None = None
    stage: RenderStage | None = None
    duration_ms: int | None = None


class RenderPdfRequest(BaseModel):
    """Request to render a URL to a downloadable PDF."""

    url: str = Field(..., min_length=1, description="Page to render")
    filename: str | None = Field(
        default=None, description="Download filename (default download.pdf)"
    )
    format: PageFormat | None = Field(default=None, description="A4, Letter or Legal")
    margin: PdfMargin | None = Field(
        default=None, description="Margins (top, right, bottom, left in CSS units)"
    )
    print_background: bool | None = Field(
        default=None, description="Include background colors and images"
    )

    def render_overrides(self) -> dict[str, Any]:
        """Options the caller actually supplied."""
        return self.model_dump(
            include={"format", "margin", "print_background"}, exclude_none=True
        )
