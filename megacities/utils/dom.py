"""
Minimal element tree used to build the served page.

Elements carry a tag, an optional id, an inline style string, extra
attributes, their own text and child elements. Text is always escaped on
serialization, so feature properties can never inject markup.
"""
import html
from typing import Dict, Iterator, List, Optional


class Element:
    def __init__(
        self,
        tag: str,
        text: Optional[str] = None,
        id: Optional[str] = None,
        style: Optional[str] = None,
        **attrs: str,
    ):
        self.tag = tag
        self.text = text
        self.id = id
        self.style = style
        self.attrs: Dict[str, str] = {k.rstrip("_"): str(v) for k, v in attrs.items()}
        self.children: List["Element"] = []

    def append(self, child: "Element") -> "Element":
        """Append a child and return it, like appendChild."""
        self.children.append(child)
        return child

    def replace_children(self, *children: "Element") -> None:
        """Drop own text and children, then append the given ones."""
        self.text = None
        self.children = list(children)

    def set_text(self, text: str) -> None:
        """Equivalent of assigning textContent."""
        self.text = text
        self.children = []

    @property
    def text_content(self) -> str:
        return (self.text or "") + "".join(child.text_content for child in self.children)

    def iter(self) -> Iterator["Element"]:
        yield self
        for child in self.children:
            yield from child.iter()

    def find_by_id(self, element_id: str) -> Optional["Element"]:
        for element in self.iter():
            if element.id == element_id:
                return element
        return None

    def find_all(self, tag: str) -> List["Element"]:
        return [element for element in self.iter() if element.tag == tag]

    def to_html(self) -> str:
        attrs = ""
        if self.id is not None:
            attrs += f' id="{html.escape(self.id)}"'
        if self.style:
            attrs += f' style="{html.escape(self.style)}"'
        for name, value in self.attrs.items():
            attrs += f' {name}="{html.escape(value)}"'

        inner = html.escape(self.text, quote=False) if self.text else ""
        inner += "".join(child.to_html() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"

    def __repr__(self):
        return f"Element(tag={self.tag!r}, id={self.id!r}, children={len(self.children)})"


class Document:
    """A page: a head title plus a body element tree."""

    def __init__(self, title: str = ""):
        self.title = title
        self.body = Element("body")

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self.body.find_by_id(element_id)

    def to_html(self) -> str:
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{html.escape(self.title)}</title>\n"
            "</head>\n"
            f"{self.body.to_html()}\n"
            "</html>\n"
        )
