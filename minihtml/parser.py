import logging
import sys
from dataclasses import dataclass, field
from typing import Callable

from minihtml.errors import MatchError, NestingTooDeepError
from minihtml.node import Element, Node, Text

logger = logging.getLogger(__name__)

# Each nesting level costs three stack frames
# (parse_element -> parse_nodes -> parse_node).
FRAMES_PER_LEVEL = 3
# Frames reserved for the caller of parse().
STACK_HEADROOM = 150
DEFAULT_MAX_DEPTH = 200


def max_supported_depth() -> int:
    """Deepest nesting the current recursion limit can parse."""
    return (sys.getrecursionlimit() - STACK_HEADROOM) // FRAMES_PER_LEVEL


ASCII_LETTERS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
ASCII_DIGITS = frozenset("0123456789")


def is_tag_name_char(c: str) -> bool:
    return c in ASCII_LETTERS or c in ASCII_DIGITS


def is_attribute_name_char(c: str) -> bool:
    return c in ASCII_LETTERS or c == '-'


def is_word_char(c: str) -> bool:
    return c in ASCII_LETTERS or c in ASCII_DIGITS or c == '_'


@dataclass
class HTMLParser:
    """
    Recursive-descent parser for a small, well-formed subset of HTML.

    One grammar rule per method; the call stack mirrors the nesting of
    tags. Any failure raises a ParseError and aborts the whole parse.
    """

    body: str = ""
    position: int = 0
    max_depth: int = DEFAULT_MAX_DEPTH
    allow_duplicate_attributes: bool = True
    depth: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        limit = max_supported_depth()
        if self.max_depth > limit:
            raise ValueError(
                f"max_depth {self.max_depth} exceeds {limit}, the deepest "
                f"nesting the recursion limit of {sys.getrecursionlimit()} allows"
            )

    def parse(self) -> Node:
        logger.debug("parsing %d characters", len(self.body))
        nodes = self.parse_nodes()

        if not nodes:
            raise MatchError("a node", self.body, self.position)
        if not self.at_end():
            # only a stray closing tag stops parse_nodes early at top level
            raise MatchError("end of input", self.body, self.position)

        if len(nodes) == 1:
            return nodes[0]

        logger.debug("wrapping %d top-level nodes in <html>", len(nodes))
        return Element(tag='html', children=nodes)

    ####
    # Cursor primitives
    ####
    def peek(self, offset: int = 0) -> str | None:
        index = self.position + offset
        if index >= len(self.body):
            return None
        return self.body[index]

    def starts_with(self, literal: str, offset: int = 0) -> bool:
        if not isinstance(literal, str):
            raise TypeError(
                f"literal must be str, not {type(literal).__name__}"
            )
        start = self.position + offset
        return self.body[start:start + len(literal)] == literal

    def at_end(self) -> bool:
        return self.position >= len(self.body)

    def advance(self) -> str | None:
        self.position += 1
        return self.peek()

    def consume_while(self, predicate: Callable[[str], bool], expected: str) -> str:
        if not callable(predicate):
            raise TypeError(
                f"predicate must be callable, not {type(predicate).__name__}"
            )
        start = end = self.position
        while end < len(self.body) and predicate(self.body[end]):
            end += 1

        if end == start:
            raise MatchError(expected, self.body, start)

        self.position = end
        return self.body[start:end]

    def skip_spaces(self) -> None:
        while self.peek() == ' ':
            self.position += 1

    def expect(self, literal: str) -> None:
        if not self.starts_with(literal):
            raise MatchError(repr(literal), self.body, self.position)
        self.position += len(literal)

    ####
    # Grammar rules
    ####
    def parse_tag_name(self) -> str:
        return self.consume_while(is_tag_name_char, "tag name")

    def parse_node(self) -> Node:
        if self.peek() == '<':
            return self.parse_element()
        return self.parse_text()

    def parse_text(self) -> Text:
        end = self.body.find('<', self.position)
        if end == -1:
            # text running to the end of input is never terminated
            raise MatchError("'<' after text", self.body, len(self.body))
        if end == self.position:
            raise MatchError("text", self.body, self.position)

        text = self.body[self.position:end]
        self.position = end
        return Text(text=text)

    def parse_attributes(self) -> dict[str, str]:
        attributes: dict[str, str] = {}

        while True:
            self.skip_spaces()
            if self.peek() == '>' or self.starts_with('/>'):
                return attributes

            name_start = self.position
            name = self.consume_while(is_attribute_name_char, "attribute name")
            self.expect('=')
            self.expect('"')
            value = self.consume_while(is_word_char, "attribute value")
            self.expect('"')

            if name in attributes:
                if not self.allow_duplicate_attributes:
                    raise MatchError(
                        f"no repeat of attribute {name!r}",
                        self.body,
                        name_start,
                    )
                logger.debug(
                    "attribute %r repeated at %d, keeping last value",
                    name, name_start,
                )
            attributes[name] = value

    def parse_element(self) -> Element:
        start = self.position

        # Opening tag
        self.expect('<')
        tag = self.parse_tag_name()
        attributes = self.parse_attributes()
        if self.starts_with('/>'):
            self.position += 2
            return Element(tag=tag, attributes=attributes)
        self.expect('>')

        # Contents
        if self.depth >= self.max_depth:
            raise NestingTooDeepError(self.max_depth, self.body, start)
        self.depth += 1
        children = self.parse_nodes()
        self.depth -= 1

        # Closing tag
        self.expect(f"</{tag}>")

        return Element(tag=tag, attributes=attributes, children=children)

    def parse_nodes(self) -> list[Node]:
        nodes: list[Node] = []

        while not (self.at_end() or self.starts_with('</')):
            self.skip_spaces()
            # spaces before a closing tag or the end of input are not a node
            if self.at_end() or self.starts_with('</'):
                break
            nodes.append(self.parse_node())

        return nodes
