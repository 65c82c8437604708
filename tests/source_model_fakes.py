"""
In-memory source model used by the engine tests.
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from typing import Dict, List, Optional

from jaxrs_lens.models.domain_models import SourceRange
from jaxrs_lens.utils.exceptions import ModelAccessError
from jaxrs_lens.utils.text_document import TextDocument


class FakeAnnotation:

    def __init__(self, fully_qualified_name: str, members: Dict[str, Optional[str]] = None,
                 source_range: SourceRange = SourceRange(0, 0), defaults: Dict[str, str] = None):
        self.fully_qualified_name = fully_qualified_name
        self.members = members or {}
        self.source_range = source_range
        self.defaults = defaults or {}

    def get_fully_qualified_name(self) -> str:
        return self.fully_qualified_name

    def get_source_range(self) -> SourceRange:
        return self.source_range

    def get_member_value(self, name: str) -> Optional[str]:
        return self.members.get(name)

    def get_default_value(self, name: str) -> Optional[str]:
        return self.defaults.get(name)


class FakeElement:

    def __init__(self, name: str, annotations: List[FakeAnnotation] = None, document: TextDocument = None,
                 declaring_class: "FakeElement" = None, error: Exception = None):
        self.name = name
        self.annotations = annotations or []
        self.document = document or TextDocument("")
        self.declaring_class = declaring_class
        self.error = error
        self.reads = 0

    def get_element_name(self) -> str:
        return self.name

    def get_annotations(self) -> List[FakeAnnotation]:
        self.reads += 1
        if self.error is not None:
            raise self.error
        return self.annotations

    def get_source_range(self) -> SourceRange:
        return SourceRange(0, 0)

    def get_document(self) -> TextDocument:
        return self.document

    def get_declaring_class(self) -> Optional["FakeElement"]:
        return self.declaring_class


def stale_element(name: str = "stale") -> FakeElement:
    return FakeElement(name, error=ModelAccessError(f"{name} is no longer valid"))
