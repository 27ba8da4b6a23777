"""
Minimal document tree for the rendered chart.

Elements keep their attributes and inline style inspectable so that tests
(and the tooltip controller) can read back what was drawn, and serialize
to SVG/HTML markup for the browser.
"""

from dataclasses import dataclass, field
from html import escape
from typing import Dict, Iterator, List, Optional

from .formatting import number_string


def _attr_value(value) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return number_string(value)
    return str(value)


@dataclass
class Element:
    tag: str
    attrs: Dict[str, str] = field(default_factory=dict)
    style: Dict[str, str] = field(default_factory=dict)
    children: List["Element"] = field(default_factory=list)
    text: Optional[str] = None

    def append(self, tag: str, **attrs) -> "Element":
        """Create a child element; `class_` maps to `class`, `_` to `-`."""
        child = Element(tag)
        for name, value in attrs.items():
            child.set(name.rstrip("_").replace("_", "-"), value)
        self.children.append(child)
        return child

    def set(self, name: str, value) -> "Element":
        self.attrs[name] = _attr_value(value)
        return self

    def get(self, name: str) -> Optional[str]:
        return self.attrs.get(name)

    def css(self, name: str, value) -> "Element":
        self.style[name] = _attr_value(value)
        return self

    def set_text(self, text: str) -> "Element":
        self.text = text
        return self

    @property
    def classes(self) -> List[str]:
        return self.attrs.get("class", "").split()

    def iter(self) -> Iterator["Element"]:
        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, tag: Optional[str] = None, class_name: Optional[str] = None) -> List["Element"]:
        return [
            el for el in self.iter()
            if (tag is None or el.tag == tag)
            and (class_name is None or class_name in el.classes)
        ]

    def find(self, tag: Optional[str] = None, class_name: Optional[str] = None) -> Optional["Element"]:
        matches = self.find_all(tag, class_name)
        return matches[0] if matches else None

    def to_markup(self) -> str:
        attrs = dict(self.attrs)
        if self.style:
            attrs["style"] = "; ".join(f"{k}: {v}" for k, v in self.style.items())

        rendered = "".join(f' {k}="{escape(v, quote=True)}"' for k, v in attrs.items())
        inner = escape(self.text) if self.text is not None else ""
        inner += "".join(child.to_markup() for child in self.children)
        return f"<{self.tag}{rendered}>{inner}</{self.tag}>"
