"""XML mapper artifacts"""

from dataclasses import dataclass, field
from typing import List, Tuple, Union


@dataclass
class TextElement:
    """Raw text inside an XML element, comments included"""
    content: str


@dataclass
class XmlElement:
    """An XML element with ordered attributes and children"""
    name: str
    attributes: List[Tuple[str, str]] = field(default_factory=list)
    elements: List[Union['XmlElement', TextElement]] = field(default_factory=list)

    def add_attribute(self, name: str, value: str) -> None:
        self.attributes.append((name, value))

    def add_element(self, element: Union['XmlElement', TextElement]) -> None:
        self.elements.append(element)
