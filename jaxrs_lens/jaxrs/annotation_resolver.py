from typing import Iterable, Optional, Sequence

from jaxrs_lens.models.source_model import Annotation, SourceElement
from jaxrs_lens.utils.exceptions import ModelAccessError


def annotations_of(element: SourceElement) -> Sequence[Annotation]:
    """Return the element's annotations in declaration order.

    Raises:
        ModelAccessError: the element can no longer be introspected.
    """
    try:
        return element.get_annotations() or ()
    except ModelAccessError:
        raise
    except Exception as e:
        raise ModelAccessError(f"Cannot read annotations of {element!r}: {e}") from e


def qualified_name(annotation: Annotation) -> str:
    try:
        return annotation.get_fully_qualified_name()
    except ModelAccessError:
        raise
    except Exception as e:
        raise ModelAccessError(f"Cannot read annotation name of {annotation!r}: {e}") from e


def find_annotation(element: SourceElement, candidate_names: Iterable[str]) -> Optional[Annotation]:
    """
    Return the first annotation of ``element`` matching ``candidate_names``.

    Candidate names are tried in the given order and, for each of them, the
    element's annotations in declaration order.

    Args:
        element: the annotatable class or method.
        candidate_names: fully-qualified annotation names.

    Returns:
        The matching annotation, or None when the element has none of them.
    """
    annotations = annotations_of(element)
    if not annotations:
        return None
    names = [qualified_name(annotation) for annotation in annotations]
    for candidate in candidate_names:
        for annotation, name in zip(annotations, names):
            if name == candidate:
                return annotation
    return None


def has_annotation(element: SourceElement, candidate_names: Iterable[str]) -> bool:
    return find_annotation(element, candidate_names) is not None


def member_value(annotation: Optional[Annotation], member_name: str) -> Optional[str]:
    """
    Return the string literal value of ``member_name``.

    Falls back to the member's declared default when the model knows it.
    Non-literal values resolve to None.
    """
    if annotation is None:
        return None
    try:
        value = annotation.get_member_value(member_name)
        if value is None:
            value = annotation.get_default_value(member_name)
    except ModelAccessError:
        raise
    except Exception as e:
        raise ModelAccessError(f"Cannot read member '{member_name}' of {annotation!r}: {e}") from e
    return value if isinstance(value, str) else None
