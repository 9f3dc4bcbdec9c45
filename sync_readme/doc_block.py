"""Data models for extracted inner documentation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocLine:
    """One line of inner documentation, prefix already removed."""

    text: str
    hidden: bool = False


@dataclass
class DocBlock:
    """Ordered documentation lines plus the newline style used to render them."""

    lines: list[DocLine] = field(default_factory=list)
    crlf: bool = False

    @property
    def newline(self) -> str:
        """Line separator used when rendering."""
        return "\r\n" if self.crlf else "\n"

    def texts(self) -> list[str]:
        """Return the raw text of every line."""
        return [line.text for line in self.lines]

    def render(self) -> str:
        """Join the lines with the block's newline."""
        return self.newline.join(self.texts())
