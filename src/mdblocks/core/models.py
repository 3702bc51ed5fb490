"""Block and span data models produced by the classifier"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Plain(BaseModel):
    """Unstyled inline text."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["plain"] = "plain"
    text: str


class Strong(BaseModel):
    """Strong (bold) inline text, delimiters removed."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["strong"] = "strong"
    text: str


Span = Annotated[Union[Plain, Strong], Field(discriminator="kind")]
Spans = tuple[Span, ...]


class Heading(BaseModel):
    """A single heading line; level is the rendered level (raw level shifted down one)."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["heading"] = "heading"
    level: int = Field(ge=2, le=4)
    spans: Spans = ()

    @property
    def tier(self) -> int:
        """Style tier 1..3 (level 2 is the most prominent)."""
        return self.level - 1


class Paragraph(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["paragraph"] = "paragraph"
    spans: Spans = ()


class BulletList(BaseModel):
    """Run of contiguous bullet lines; one item per line, marker stripped."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["list"] = "list"
    items: tuple[Spans, ...] = Field(min_length=1)


class Table(BaseModel):
    """Run of contiguous pipe lines; body rows may be ragged."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["table"] = "table"
    header_cells: tuple[Spans, ...] = ()
    body_rows: tuple[tuple[Spans, ...], ...] = ()


Block = Annotated[Union[Heading, Paragraph, BulletList, Table], Field(discriminator="kind")]


class BlockDoc(BaseModel):
    """A parsed source file: frontmatter plus its ordered block sequence."""
    slug: str
    path: str
    markdown: str                   # body without frontmatter
    frontmatter: dict[str, Any] = {}
    blocks: list[Block] = []

    @property
    def title(self) -> str | None:
        title = self.frontmatter.get("title")
        return str(title) if title else None
