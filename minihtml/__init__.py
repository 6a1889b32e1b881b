from minihtml.errors import MatchError, NestingTooDeepError, ParseError
from minihtml.node import Element, Node, NodeType, Text
from minihtml.parser import DEFAULT_MAX_DEPTH, HTMLParser, max_supported_depth


def parse_html(text: str, **options) -> Node:
    """Parse ``text`` into a tree; ``options`` are HTMLParser fields."""
    return HTMLParser(body=text, **options).parse()


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Element",
    "HTMLParser",
    "MatchError",
    "NestingTooDeepError",
    "Node",
    "NodeType",
    "ParseError",
    "Text",
    "max_supported_depth",
    "parse_html",
]
