"""Read-only wrapper around a parsed XML document."""

import xml.etree.ElementTree as ET


class Leaf:
    """A node in a parsed XML tree.

    Only offers what the archive readers need: path selection, attribute
    access and text content. Missing attributes read as empty strings.
    """

    def __init__(self, element: ET.Element) -> None:
        self.element = element

    @classmethod
    def parse(cls, data: bytes) -> "Leaf":
        """Parse an XML document and return a leaf wrapping a virtual root.

        Raises ``ET.ParseError`` if the document is not well-formed.
        """
        root = ET.fromstring(data)
        document = ET.Element("#document")
        document.append(root)
        return cls(document)

    @property
    def tag(self) -> str:
        return self.element.tag

    @property
    def text(self) -> str:
        return "".join(self.element.itertext()).strip()

    def attribute(self, name: str) -> str:
        """Return an attribute value, or an empty string if it is not set."""
        return self.element.get(name, "")

    def select(self, path: str) -> list["Leaf"]:
        """Return all nodes matching a slash-separated path."""
        return [Leaf(e) for e in self.element.findall(path.lstrip("/"))]

    def select_first(self, path: str) -> "Leaf | None":
        """Return the first node matching a slash-separated path."""
        found = self.element.find(path.lstrip("/"))
        return Leaf(found) if found is not None else None
