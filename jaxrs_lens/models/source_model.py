from typing import Optional, Protocol, Sequence

from jaxrs_lens.models.domain_models import Position, SourceRange


class PositionConverter(Protocol):
    def position_at(self, offset: int) -> Position: ...


class Annotation(Protocol):
    def get_fully_qualified_name(self) -> str: ...
    def get_source_range(self) -> SourceRange: ...
    def get_member_value(self, name: str) -> Optional[str]: ...
    def get_default_value(self, name: str) -> Optional[str]: ...


class SourceElement(Protocol):
    """A class or method of the source model.

    Annotations are returned in declaration order. ``get_declaring_class`` is
    ``None`` for top-level classes.
    """

    def get_element_name(self) -> str: ...
    def get_annotations(self) -> Sequence[Annotation]: ...
    def get_source_range(self) -> SourceRange: ...
    def get_document(self) -> PositionConverter: ...
    def get_declaring_class(self) -> Optional["SourceElement"]: ...
