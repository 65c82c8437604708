from typing import Optional

from loguru import logger

from jaxrs_lens.config.jaxrs_constants import AnnotationRole, JaxRsConstants, names_for
from jaxrs_lens.jaxrs.annotation_resolver import find_annotation, member_value
from jaxrs_lens.jaxrs.endpoint_locator import anchor_position, is_endpoint, is_primary
from jaxrs_lens.jaxrs.http_method_classifier import first_http_method
from jaxrs_lens.jaxrs.path_composer import compose
from jaxrs_lens.models.domain_models import EndpointDescriptor
from jaxrs_lens.models.source_model import SourceElement


def get_jaxrs_path_value(element: SourceElement) -> Optional[str]:
    """Returns the value of the JAX-RS/Jakarta Path annotation and None otherwise."""
    annotation = find_annotation(element, names_for(AnnotationRole.PATH))
    return member_value(annotation, JaxRsConstants.PATH_VALUE)


def get_jaxrs_application_path_value(element: SourceElement) -> Optional[str]:
    """Returns the value of the JAX-RS/Jakarta ApplicationPath annotation and None otherwise."""
    annotation = find_annotation(element, names_for(AnnotationRole.APPLICATION_PATH))
    return member_value(annotation, JaxRsConstants.PATH_VALUE)


def build_url(base_url: Optional[str], class_element: SourceElement, method_element: SourceElement,
              application_element: Optional[SourceElement] = None) -> Optional[EndpointDescriptor]:
    """
    Resolve the endpoint exposed by ``method_element``.

    The URL is ``base_url`` + application path + class path + method path.
    The application path is read from ``application_element`` (the class
    annotated with @ApplicationPath in the project) and from the resource
    class itself when no application element is given.

    Args:
        base_url: e.g. ``http://localhost:8080``, may be None.
        class_element: the resource class declaring the method.
        method_element: the resource method.
        application_element: the JAX-RS application class, if known.

    Returns:
        The endpoint descriptor, or None when the method is not an endpoint.

    Raises:
        ModelAccessError: the source model of this method can't be read.
    """
    if not is_endpoint(method_element):
        return None

    application_path = get_jaxrs_application_path_value(
        application_element if application_element is not None else class_element)
    class_path = get_jaxrs_path_value(class_element)
    method_path = get_jaxrs_path_value(method_element)
    url = compose([base_url, application_path, class_path, method_path])

    http_method = first_http_method(method_element)
    if http_method is None:
        logger.warning(f"Endpoint {method_element.get_element_name()} has no HTTP method annotation, skipping")
        return None

    position = anchor_position(method_element)
    if position is None:
        logger.warning(f"Endpoint {method_element.get_element_name()} has no annotation to anchor to, skipping")
        return None

    return EndpointDescriptor(
        method=method_element,
        http_method=http_method,
        is_primary=is_primary(method_element),
        resolved_url=url,
        anchor_position=position,
    )
