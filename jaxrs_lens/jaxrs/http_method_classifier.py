from typing import Dict, Optional

from jaxrs_lens.config.jaxrs_constants import AnnotationRole, HTTP_METHOD_ANNOTATIONS, names_for
from jaxrs_lens.jaxrs.annotation_resolver import annotations_of, has_annotation, qualified_name
from jaxrs_lens.models.domain_models import HttpMethod
from jaxrs_lens.models.source_model import SourceElement

_VERB_ROLES = {
    AnnotationRole.GET: HttpMethod.GET,
    AnnotationRole.HEAD: HttpMethod.HEAD,
    AnnotationRole.POST: HttpMethod.POST,
    AnnotationRole.PUT: HttpMethod.PUT,
    AnnotationRole.DELETE: HttpMethod.DELETE,
    AnnotationRole.PATCH: HttpMethod.PATCH,
}

_HTTP_METHOD_BY_ANNOTATION: Dict[str, HttpMethod] = {
    name: http_method
    for role, http_method in _VERB_ROLES.items()
    for name in names_for(role)
}


def classify(annotation_fqn: str) -> Optional[HttpMethod]:
    """
    Returns the HttpMethod of a JAX-RS or Jakarta RESTful annotation, or None
    if the FQN doesn't match any HttpMethod.
    """
    return _HTTP_METHOD_BY_ANNOTATION.get(annotation_fqn)


def first_http_method(element: SourceElement) -> Optional[HttpMethod]:
    """Return the verb of the first classifying annotation in declaration order."""
    for annotation in annotations_of(element):
        http_method = classify(qualified_name(annotation))
        if http_method is not None:
            return http_method
    return None


def is_endpoint_method(element: SourceElement) -> bool:
    """True if the element has @GET, @HEAD, @POST, @PUT, @DELETE or @PATCH."""
    return first_http_method(element) is not None


def is_request_method(element: SourceElement) -> bool:
    """Like is_endpoint_method, but @OPTIONS also counts."""
    return has_annotation(element, HTTP_METHOD_ANNOTATIONS)
