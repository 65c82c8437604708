from typing import Optional

from jaxrs_lens.config.jaxrs_constants import AnnotationRole, names_for
from jaxrs_lens.jaxrs.annotation_resolver import annotations_of, has_annotation
from jaxrs_lens.jaxrs.http_method_classifier import is_endpoint_method
from jaxrs_lens.models.domain_models import Position
from jaxrs_lens.models.source_model import SourceElement
from jaxrs_lens.utils.exceptions import ModelAccessError


def is_endpoint(method: SourceElement) -> bool:
    return is_endpoint_method(method)


def is_primary(method: SourceElement) -> bool:
    """True if the method has @GET (javax or jakarta), i.e. it can be opened in a browser."""
    return has_annotation(method, names_for(AnnotationRole.GET))


def anchor_position(method: SourceElement) -> Optional[Position]:
    """
    Position of the code lens of ``method``: the line right after its last
    annotation, at the column where that annotation ends.

    Returns None when the method has no annotations.
    """
    annotations = annotations_of(method)
    if not annotations:
        return None
    try:
        source_range = annotations[-1].get_source_range()
        end = method.get_document().position_at(source_range.offset + source_range.length)
    except ModelAccessError:
        raise
    except Exception as e:
        raise ModelAccessError(f"Cannot compute the code lens position of {method!r}: {e}") from e
    return Position(end.line + 1, end.character)
