import re
import textwrap
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from loguru import logger
from tree_sitter import Language, Parser, Node, Query, QueryCursor
from tree_sitter_language_pack import get_language

from jaxrs_lens.analyzers.java_model import (
    JavaAnnotation,
    JavaCompilationUnit,
    JavaMethod,
    JavaProject,
    JavaType,
)
from jaxrs_lens.config.java_constants import JavaCodeAnalyzerConstant, JavaParsingConstants
from jaxrs_lens.config.jaxrs_constants import KNOWN_ANNOTATIONS
from jaxrs_lens.models.domain_models import SourceRange
from jaxrs_lens.utils.common import normalize_whitespace, read_file_content
from jaxrs_lens.utils.tree_sitter_helper import extract_content

_ESCAPE_PATTERN = re.compile(r"\\(u+[0-9a-fA-F]{4}|[0-7]{1,3}|.)", re.DOTALL)


def _unescape(match: "re.Match") -> str:
    sequence = match.group(1)
    if sequence[0] == "u":
        return chr(int(sequence.lstrip("u"), 16))
    if sequence[0] in "01234567":
        return chr(int(sequence, 8))
    return JavaParsingConstants.SIMPLE_ESCAPES.get(sequence, sequence)


def decode_string_literal(literal: str) -> str:
    """
    Decode the source text of a Java string literal.

    Handles formats like:
    - "/users"
    - "/users/{id}"
    - "a\\tb" (escape sequences)
    - text blocks
    """
    if literal.startswith('"""'):
        body = literal[3:-3]
        if body.startswith("\n"):
            body = body[1:]
        body = textwrap.dedent(body)
    else:
        body = literal[1:-1]
    return _ESCAPE_PATTERN.sub(_unescape, body)


@dataclass
class ClassParsingContext:
    unit: JavaCompilationUnit
    source: bytes
    is_ascii: bool


class JavaSourceAnalyzer:
    """Builds the annotation-level source model of Java files with tree-sitter."""

    def __init__(self):
        language: Language = get_language("java")
        self.language = language
        self.parser = Parser(language)

        # Performance: Cache compiled Query objects
        self._query_cache = {}

        # annotation type FQN -> {member name: default string literal}
        self.annotation_defaults: Dict[str, Dict[str, str]] = {}

    def parse_source(self, text: str, file_path: str = "<memory>", version: int = 0) -> JavaCompilationUnit:
        """Parse a single Java source text into a compilation unit."""
        source = text.encode("utf-8")
        tree = self.parser.parse(source)
        self.index_annotation_types(tree.root_node, source)
        return self._build_unit(tree.root_node, source, text, file_path, version)

    def parse_file(self, file_path: Path) -> JavaCompilationUnit:
        return self.parse_source(read_file_content(file_path), str(file_path))

    def analyze_project(self, root: Path, target_files: Optional[List[str]] = None) -> JavaProject:
        logger.info(f"Starting analysis of Java sources at {root}")

        code_files = self._filter_files_by_targets(self._get_code_files(root), target_files)
        if not code_files:
            logger.warning("No source files found")
            return JavaProject(root)

        logger.info(f"Found {len(code_files)} source files to process")

        # Annotation types of the whole project are indexed before any unit is
        # built so their declared defaults are visible from every file.
        parsed = []
        for i, file in enumerate(code_files, 1):
            try:
                text = read_file_content(file)
                source = text.encode("utf-8")
                tree = self.parser.parse(source)
                self.index_annotation_types(tree.root_node, source)
                parsed.append((file, text, source, tree))
                logger.debug(f"[{i}/{len(code_files)}] Parsed: {file}")
            except (OSError, ValueError) as e:
                logger.error(f"Error reading {file}: {e}")

        units = []
        for file, text, source, tree in parsed:
            units.append(self._build_unit(tree.root_node, source, text, str(file), 0))

        logger.info(f"Built {len(units)} compilation units")
        return JavaProject(root, units)

    def index_annotation_types(self, root_node: Node, source: bytes) -> None:
        """Record the string defaults of the annotation types declared in a file."""
        package = self._extract_package(root_node, source)
        captures = self._query_captures("(annotation_type_declaration) @annotation_type", root_node)
        for node in captures.get("annotation_type", []):
            full_name = self._build_full_type_name(node, package, source)
            if not full_name:
                continue
            defaults = {}
            body = node.child_by_field_name("body")
            for element in body.children if body is not None else []:
                if element.type != "annotation_type_element_declaration":
                    continue
                name_node = element.child_by_field_name("name")
                value = self._literal_value(element.child_by_field_name("value"), source)
                if name_node is not None and value is not None:
                    defaults[extract_content(name_node, source)] = value
            self.annotation_defaults[full_name] = defaults

    def _build_unit(self, root_node: Node, source: bytes, text: str, file_path: str,
                    version: int) -> JavaCompilationUnit:
        package = self._extract_package(root_node, source)
        import_mapping, wildcard_imports = self._extract_imports(root_node, source)
        unit = JavaCompilationUnit(file_path, text, package, import_mapping, wildcard_imports, version)
        context = ClassParsingContext(unit=unit, source=source, is_ascii=len(source) == len(text))
        unit.types = self._extract_types(root_node.children, context, None)
        return unit

    def _extract_types(self, nodes: Iterable[Node], context: ClassParsingContext,
                       declaring_class: Optional[JavaType]) -> List[JavaType]:
        types = []
        for node in nodes:
            if node.type not in JavaParsingConstants.CLASS_NODE_TYPES:
                continue
            java_type = self._build_type(node, context, declaring_class)
            if java_type:
                types.append(java_type)
        return types

    def _build_type(self, class_node: Node, context: ClassParsingContext,
                    declaring_class: Optional[JavaType]) -> Optional[JavaType]:
        name_node = class_node.child_by_field_name("name")
        if name_node is None:
            return None

        name = extract_content(name_node, context.source)
        if declaring_class is not None:
            full_name = f"{declaring_class.fully_qualified_name}.{name}"
        else:
            package = context.unit.package
            full_name = f"{package}.{name}" if package else name

        java_type = JavaType(
            unit=context.unit,
            name=name,
            fully_qualified_name=full_name,
            source_range=self._source_range(class_node, context),
            annotations=self._extract_annotations(class_node, context),
            declaring_class=declaring_class,
        )

        members = self._get_class_members(class_node)
        for member in members:
            if member.type == JavaParsingConstants.METHOD_NODE_TYPE:
                method = self._build_method(member, context, java_type)
                if method:
                    java_type.methods.append(method)
        java_type.nested_types = self._extract_types(members, context, java_type)
        return java_type

    def _get_class_members(self, class_node: Node) -> List[Node]:
        body = class_node.child_by_field_name("body")
        if body is None or body.type not in JavaParsingConstants.CLASS_BODY_TYPES:
            return []
        members = []
        for child in body.children:
            # enum constants come first, regular members follow in enum_body_declarations
            if child.type == "enum_body_declarations":
                members.extend(child.children)
            else:
                members.append(child)
        return members

    def _build_method(self, method_node: Node, context: ClassParsingContext,
                      declaring_class: JavaType) -> Optional[JavaMethod]:
        name_node = method_node.child_by_field_name("name")
        if name_node is None:
            return None
        name = extract_content(name_node, context.source)
        params_node = method_node.child_by_field_name("parameters")
        params = extract_content(params_node, context.source) if params_node is not None else "()"

        return JavaMethod(
            unit=context.unit,
            name=name,
            signature=normalize_whitespace(f"{name}{params}"),
            source_range=self._source_range(method_node, context),
            annotations=self._extract_annotations(method_node, context),
            declaring_class=declaring_class,
        )

    def _extract_annotations(self, node: Node, context: ClassParsingContext) -> List[JavaAnnotation]:
        modifiers = self._find_child_by_type(node, "modifiers")
        if modifiers is None:
            return []

        annotations = []
        for child in modifiers.children:
            if child.type not in JavaParsingConstants.ANNOTATION_NODE_TYPES:
                continue
            annotation = self._build_annotation(child, context)
            if annotation:
                annotations.append(annotation)
        return annotations

    def _build_annotation(self, annotation_node: Node, context: ClassParsingContext) -> Optional[JavaAnnotation]:
        name_node = annotation_node.child_by_field_name("name")
        if name_node is None:
            return None

        # @javax.ws.rs.Path may be written with blanks around the dots
        raw_name = "".join(extract_content(name_node, context.source).split())
        members: Dict[str, Optional[str]] = {}

        arguments = annotation_node.child_by_field_name("arguments")
        if arguments is not None:
            for argument in arguments.named_children:
                if argument.type.endswith("comment"):
                    continue
                if argument.type == "element_value_pair":
                    key = argument.child_by_field_name("key")
                    if key is None:
                        continue
                    members[extract_content(key, context.source)] = self._literal_value(
                        argument.child_by_field_name("value"), context.source)
                else:
                    members[JavaParsingConstants.DEFAULT_MEMBER] = self._literal_value(argument, context.source)

        return JavaAnnotation(
            unit=context.unit,
            name=raw_name,
            fully_qualified_name=self._resolve_annotation_name(raw_name, context.unit),
            members=members,
            source_range=self._source_range(annotation_node, context),
            annotation_defaults=self.annotation_defaults,
        )

    def _resolve_annotation_name(self, raw_name: str, unit: JavaCompilationUnit) -> str:
        """
        Resolve the fully qualified name of an annotation (e.g. javax.ws.rs.GET).

        Wildcard imports only resolve names known to exist: the JAX-RS
        vocabulary and the annotation types declared in the project.
        """
        # If already fully qualified, return as is
        if "." in raw_name:
            return raw_name

        if raw_name in unit.import_mapping:
            return unit.import_mapping[raw_name]

        for package in unit.wildcard_imports:
            candidate = f"{package}.{raw_name}"
            if candidate in KNOWN_ANNOTATIONS or candidate in self.annotation_defaults:
                return candidate

        if unit.package and f"{unit.package}.{raw_name}" in self.annotation_defaults:
            return f"{unit.package}.{raw_name}"

        return raw_name

    def _literal_value(self, node: Optional[Node], source: bytes) -> Optional[str]:
        if node is None or node.type != "string_literal":
            return None
        return decode_string_literal(extract_content(node, source))

    def _extract_package(self, root_node: Node, source: bytes) -> str:
        captures = self._query_captures("""
            (package_declaration
                [(scoped_identifier) (identifier)] @package)
        """, root_node)
        package_nodes = captures.get("package")
        if package_nodes:
            return extract_content(package_nodes[0], source)
        return ""

    def _extract_imports(self, root_node: Node, source: bytes) -> Tuple[Dict[str, str], Tuple[str, ...]]:
        import_mapping = {}
        wildcard_imports = []

        for child in root_node.children:
            if child.type != "import_declaration":
                continue
            if self._find_child_by_type(child, "static"):
                continue
            name_node = self._find_child_by_type(child, "scoped_identifier") or \
                self._find_child_by_type(child, "identifier")
            if name_node is None:
                continue

            import_path = extract_content(name_node, source)
            if self._find_child_by_type(child, "asterisk"):
                wildcard_imports.append(import_path)
            elif "." in import_path:
                import_mapping[import_path.split(".")[-1]] = import_path

        return import_mapping, tuple(wildcard_imports)

    def _build_full_type_name(self, type_node: Node, package: str, source: bytes) -> Optional[str]:
        names = []
        node = type_node
        while node is not None:
            if node.type in JavaParsingConstants.CLASS_NODE_TYPES or \
                    node.type == JavaParsingConstants.ANNOTATION_TYPE_NODE_TYPE:
                name_node = node.child_by_field_name("name")
                if name_node is None:
                    return None
                names.append(extract_content(name_node, source))
            node = node.parent

        names.reverse()
        nested_path = ".".join(names)
        return f"{package}.{nested_path}" if package else nested_path

    def _source_range(self, node: Node, context: ClassParsingContext) -> SourceRange:
        start = self._char_offset(node.start_byte, context)
        end = self._char_offset(node.end_byte, context)
        return SourceRange(start, end - start)

    def _char_offset(self, byte_offset: int, context: ClassParsingContext) -> int:
        if context.is_ascii:
            return byte_offset
        return len(context.source[:byte_offset].decode("utf-8", errors="replace"))

    def _get_code_files(self, root: Path) -> List[Path]:
        return sorted(
            path for path in root.rglob(JavaCodeAnalyzerConstant.JAVA_EXTENSION)
            if not any(part in JavaCodeAnalyzerConstant.EXCLUDED_DIRECTORIES
                       for part in path.relative_to(root).parts)
        )

    def _filter_files_by_targets(self, code_files: List[Path], target_files: Optional[List[str]]) -> List[Path]:
        if not target_files:
            return code_files

        filtered_files = []
        for code_file in code_files:
            code_file_str = str(code_file).replace("\\", "/")
            # Check if any target file path matches the end of this code file
            for target in target_files:
                if code_file_str.endswith(target.replace("\\", "/")):
                    filtered_files.append(code_file)
                    break

        logger.info(f"Filtered to {len(filtered_files)} files based on target_files")
        return filtered_files

    def _get_or_create_query(self, query_string: str) -> Query:
        if query_string not in self._query_cache:
            self._query_cache[query_string] = Query(self.language, query_string)
        return self._query_cache[query_string]

    def _query_captures(self, query_string: str, node: Node) -> dict:
        """Execute tree-sitter query and return captures."""
        try:
            query = self._get_or_create_query(query_string)
            return QueryCursor(query).captures(node)
        except Exception as e:
            logger.debug(f"Query execution failed for query '{query_string[:50]}...': {e}")
            return {}

    def _find_child_by_type(self, node: Node, child_type: str) -> Optional[Node]:
        """Find first child node with specified type."""
        for child in node.children:
            if child.type == child_type:
                return child
        return None
