from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class NodeType(Enum):
    ELEMENT = 1
    TEXT = 3


@dataclass(frozen=True)
class Node:
    node_type: NodeType
    children: tuple['Node', ...] = ()


@dataclass(frozen=True, init=False)
class Element(Node):
    tag: str
    # compared by ==, but left out of the hash: a mapping is unhashable
    attributes: Mapping[str, str] = field(hash=False)

    def __init__(
        self,
        tag: str,
        attributes: Mapping[str, str] | None = None,
        children: 'tuple[Node, ...] | list[Node]' = (),
    ) -> None:
        # read-only view over a private copy, so id/class_name stay in sync
        object.__setattr__(self, 'node_type', NodeType.ELEMENT)
        object.__setattr__(self, 'tag', tag)
        object.__setattr__(
            self, 'attributes', MappingProxyType(dict(attributes or {}))
        )
        object.__setattr__(self, 'children', tuple(children))

    def __repr__(self) -> str:
        if not self.attributes:
            return f"<{self.tag}>"
        return f"<{self.tag} {self.attribute_str}>"

    @property
    def id(self) -> str:
        return self.attributes.get('id', "")

    @property
    def class_name(self) -> str:
        return self.attributes.get('class', "")

    @property
    def attribute_str(self) -> str:
        attrs: list[str] = []
        for key, value in self.attributes.items():
            attrs.append(f'{key}="{value}"')
        return " ".join(attrs)


@dataclass(frozen=True, init=False)
class Text(Node):
    text: str

    def __init__(self, text: str) -> None:
        object.__setattr__(self, 'node_type', NodeType.TEXT)
        object.__setattr__(self, 'children', ())
        object.__setattr__(self, 'text', text)

    def __repr__(self) -> str:
        return repr(self.text)
