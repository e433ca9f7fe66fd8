from typing import Any, Mapping, Optional

import disnake


class Page:
    """A single renderable page of a paged menu: message content, an embed, or both."""

    __slots__ = ("content", "embed")

    def __init__(self, content: Optional[str] = None, embed: Optional[disnake.Embed] = None):
        if content is None and embed is None:
            raise ValueError("A page must have content or an embed.")
        self.content = content
        self.embed = embed

    @classmethod
    def from_value(cls, value: Any) -> "Page":
        """Wraps the result of a page formatter in a Page."""
        if isinstance(value, Page):
            return value
        if isinstance(value, str):
            return cls(content=value)
        if isinstance(value, disnake.Embed):
            return cls(embed=value)
        raise TypeError(f"Cannot make a page out of {type(value).__name__}.")

    def to_message_kwargs(self) -> Mapping:
        """Return a mapping of kwargs to send or edit a message with."""
        return {"content": self.content, "embed": self.embed}

    def __repr__(self):
        return f"<Page content={self.content!r} embed={self.embed!r}>"
