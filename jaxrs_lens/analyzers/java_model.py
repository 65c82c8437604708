from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from jaxrs_lens.config.jaxrs_constants import AnnotationRole, names_for
from jaxrs_lens.jaxrs.annotation_resolver import has_annotation
from jaxrs_lens.models.domain_models import SourceRange
from jaxrs_lens.utils.exceptions import ModelAccessError
from jaxrs_lens.utils.text_document import TextDocument


class JavaCompilationUnit:
    """One parsed ``.java`` file.

    Handles on its types, methods and annotations stay usable until the unit
    is invalidated (e.g. the file was edited and re-parsed), after which
    every accessor raises ModelAccessError.
    """

    def __init__(self, file_path: str, text: str, package: str = "",
                 import_mapping: Dict[str, str] = None, wildcard_imports: Tuple[str, ...] = (),
                 version: int = 0):
        self.file_path = file_path
        self.text = text
        self.package = package
        self.import_mapping = import_mapping or {}
        self.wildcard_imports = wildcard_imports
        self.version = version
        self.document = TextDocument(text)
        self.types: List["JavaType"] = []
        self._valid = True

    @property
    def is_valid(self) -> bool:
        return self._valid

    def invalidate(self) -> None:
        self._valid = False

    def check_valid(self) -> None:
        if not self._valid:
            raise ModelAccessError(f"{self.file_path} (version {self.version}) is no longer valid")

    def iter_types(self) -> Iterator["JavaType"]:
        """All types of the unit, nested ones included, in source order."""
        self.check_valid()
        stack = list(reversed(self.types))
        while stack:
            java_type = stack.pop()
            yield java_type
            stack.extend(reversed(java_type.nested_types))

    def __repr__(self):
        return f"JavaCompilationUnit({self.file_path!r}, version={self.version})"


class JavaAnnotation:

    def __init__(self, unit: JavaCompilationUnit, name: str, fully_qualified_name: str,
                 members: Dict[str, Optional[str]], source_range: SourceRange,
                 annotation_defaults: Mapping[str, Mapping[str, str]] = None):
        self.unit = unit
        self.name = name
        self.fully_qualified_name = fully_qualified_name
        # member name -> string literal, None when the value is not a string literal
        self.members = members
        self.source_range = source_range
        self._annotation_defaults = annotation_defaults if annotation_defaults is not None else {}

    def get_fully_qualified_name(self) -> str:
        self.unit.check_valid()
        return self.fully_qualified_name

    def get_source_range(self) -> SourceRange:
        self.unit.check_valid()
        return self.source_range

    def get_member_value(self, name: str) -> Optional[str]:
        self.unit.check_valid()
        return self.members.get(name)

    def get_default_value(self, name: str) -> Optional[str]:
        self.unit.check_valid()
        # an explicit non-literal value hides the default
        if name in self.members:
            return None
        return self._annotation_defaults.get(self.fully_qualified_name, {}).get(name)

    def __repr__(self):
        return f"@{self.fully_qualified_name}"


class _JavaMember:
    """Shared accessors of types and methods."""

    def __init__(self, unit: JavaCompilationUnit, name: str, source_range: SourceRange,
                 annotations: List[JavaAnnotation], declaring_class: Optional["JavaType"] = None):
        self.unit = unit
        self.name = name
        self.source_range = source_range
        self.annotations = annotations
        self.declaring_class = declaring_class

    def get_element_name(self) -> str:
        return self.name

    def get_annotations(self) -> List[JavaAnnotation]:
        self.unit.check_valid()
        return self.annotations

    def get_source_range(self) -> SourceRange:
        self.unit.check_valid()
        return self.source_range

    def get_document(self) -> TextDocument:
        self.unit.check_valid()
        return self.unit.document

    def get_declaring_class(self) -> Optional["JavaType"]:
        return self.declaring_class


class JavaType(_JavaMember):

    def __init__(self, unit: JavaCompilationUnit, name: str, fully_qualified_name: str,
                 source_range: SourceRange, annotations: List[JavaAnnotation],
                 declaring_class: Optional["JavaType"] = None):
        super().__init__(unit, name, source_range, annotations, declaring_class)
        self.fully_qualified_name = fully_qualified_name
        self.methods: List["JavaMethod"] = []
        self.nested_types: List["JavaType"] = []

    def get_methods(self) -> List["JavaMethod"]:
        self.unit.check_valid()
        return self.methods

    def __repr__(self):
        return f"JavaType({self.fully_qualified_name!r})"


class JavaMethod(_JavaMember):

    def __init__(self, unit: JavaCompilationUnit, name: str, signature: str, source_range: SourceRange,
                 annotations: List[JavaAnnotation], declaring_class: JavaType):
        super().__init__(unit, name, source_range, annotations, declaring_class)
        self.signature = signature

    def __repr__(self):
        owner = self.declaring_class.fully_qualified_name if self.declaring_class else "?"
        return f"JavaMethod({owner}.{self.signature})"


class JavaProject:

    def __init__(self, root: Path, units: List[JavaCompilationUnit] = None):
        self.root = root
        self.units = units or []

    def iter_types(self) -> Iterator[JavaType]:
        for unit in self.units:
            if unit.is_valid:
                yield from unit.iter_types()

    def find_application_class(self) -> Optional[JavaType]:
        """The first class annotated with @ApplicationPath (javax or jakarta), if any."""
        candidates = names_for(AnnotationRole.APPLICATION_PATH)
        for java_type in self.iter_types():
            if has_annotation(java_type, candidates):
                return java_type
        return None
