from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class HttpMethod(Enum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


@dataclass(frozen=True)
class SourceRange:
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True)
class Position:
    """Zero-based line and character, as in LSP."""
    line: int
    character: int

    def to_dict(self):
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position

    def to_dict(self):
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass
class Command:
    title: str
    command: str
    arguments: List[Any] = field(default_factory=list)

    def to_dict(self):
        return {
            "title": self.title,
            "command": self.command,
            "arguments": list(self.arguments),
        }


@dataclass
class CodeLens:
    range: Range
    command: Optional[Command] = None
    data: Optional[Any] = None

    def to_dict(self) -> Dict:
        return {
            "range": self.range.to_dict(),
            "command": self.command.to_dict() if self.command else None,
            "data": self.data,
        }


@dataclass(frozen=True)
class EndpointDescriptor:
    method: Any
    http_method: Optional[HttpMethod]
    is_primary: bool
    resolved_url: str
    anchor_position: Position

    def to_dict(self) -> Dict:
        """Convert EndpointDescriptor to a JSON-serializable dictionary."""
        declaring_class = self.method.get_declaring_class()
        return {
            "class_name": declaring_class.get_element_name() if declaring_class else None,
            "method_name": self.method.get_element_name(),
            "http_method": self.http_method.value if self.http_method else None,
            "is_primary": self.is_primary,
            "url": self.resolved_url,
            "position": self.anchor_position.to_dict(),
        }
