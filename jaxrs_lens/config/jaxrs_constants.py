from enum import Enum
from typing import Dict, FrozenSet, Tuple


class JaxRsConstants:
    # --- javax namespace (JAX-RS) ---
    JAVAX_WS_RS_PATH_ANNOTATION = "javax.ws.rs.Path"
    JAVAX_WS_RS_APPLICATIONPATH_ANNOTATION = "javax.ws.rs.ApplicationPath"
    JAVAX_WS_RS_GET_ANNOTATION = "javax.ws.rs.GET"
    JAVAX_WS_RS_HEAD_ANNOTATION = "javax.ws.rs.HEAD"
    JAVAX_WS_RS_POST_ANNOTATION = "javax.ws.rs.POST"
    JAVAX_WS_RS_PUT_ANNOTATION = "javax.ws.rs.PUT"
    JAVAX_WS_RS_DELETE_ANNOTATION = "javax.ws.rs.DELETE"
    JAVAX_WS_RS_PATCH_ANNOTATION = "javax.ws.rs.PATCH"
    JAVAX_WS_RS_OPTIONS_ANNOTATION = "javax.ws.rs.OPTIONS"

    # --- jakarta namespace (Jakarta RESTful Web Services) ---
    JAKARTA_WS_RS_PATH_ANNOTATION = "jakarta.ws.rs.Path"
    JAKARTA_WS_RS_APPLICATIONPATH_ANNOTATION = "jakarta.ws.rs.ApplicationPath"
    JAKARTA_WS_RS_GET_ANNOTATION = "jakarta.ws.rs.GET"
    JAKARTA_WS_RS_HEAD_ANNOTATION = "jakarta.ws.rs.HEAD"
    JAKARTA_WS_RS_POST_ANNOTATION = "jakarta.ws.rs.POST"
    JAKARTA_WS_RS_PUT_ANNOTATION = "jakarta.ws.rs.PUT"
    JAKARTA_WS_RS_DELETE_ANNOTATION = "jakarta.ws.rs.DELETE"
    JAKARTA_WS_RS_PATCH_ANNOTATION = "jakarta.ws.rs.PATCH"
    JAKARTA_WS_RS_OPTIONS_ANNOTATION = "jakarta.ws.rs.OPTIONS"

    JAVAX_WS_RS_PACKAGE = "javax.ws.rs"
    JAKARTA_WS_RS_PACKAGE = "jakarta.ws.rs"

    PATH_VALUE = "value"


class AnnotationRole(Enum):
    PATH = "Path"
    APPLICATION_PATH = "ApplicationPath"
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    # Marks a request method but has no verb in HttpMethod
    OPTIONS = "OPTIONS"


# Legacy (javax) name first, modern (jakarta) name second.
_ROLE_NAMES: Dict[AnnotationRole, Tuple[str, ...]] = {
    AnnotationRole.PATH: (
        JaxRsConstants.JAVAX_WS_RS_PATH_ANNOTATION,
        JaxRsConstants.JAKARTA_WS_RS_PATH_ANNOTATION,
    ),
    AnnotationRole.APPLICATION_PATH: (
        JaxRsConstants.JAVAX_WS_RS_APPLICATIONPATH_ANNOTATION,
        JaxRsConstants.JAKARTA_WS_RS_APPLICATIONPATH_ANNOTATION,
    ),
    AnnotationRole.GET: (
        JaxRsConstants.JAVAX_WS_RS_GET_ANNOTATION,
        JaxRsConstants.JAKARTA_WS_RS_GET_ANNOTATION,
    ),
    AnnotationRole.HEAD: (
        JaxRsConstants.JAVAX_WS_RS_HEAD_ANNOTATION,
        JaxRsConstants.JAKARTA_WS_RS_HEAD_ANNOTATION,
    ),
    AnnotationRole.POST: (
        JaxRsConstants.JAVAX_WS_RS_POST_ANNOTATION,
        JaxRsConstants.JAKARTA_WS_RS_POST_ANNOTATION,
    ),
    AnnotationRole.PUT: (
        JaxRsConstants.JAVAX_WS_RS_PUT_ANNOTATION,
        JaxRsConstants.JAKARTA_WS_RS_PUT_ANNOTATION,
    ),
    AnnotationRole.DELETE: (
        JaxRsConstants.JAVAX_WS_RS_DELETE_ANNOTATION,
        JaxRsConstants.JAKARTA_WS_RS_DELETE_ANNOTATION,
    ),
    AnnotationRole.PATCH: (
        JaxRsConstants.JAVAX_WS_RS_PATCH_ANNOTATION,
        JaxRsConstants.JAKARTA_WS_RS_PATCH_ANNOTATION,
    ),
    AnnotationRole.OPTIONS: (
        JaxRsConstants.JAVAX_WS_RS_OPTIONS_ANNOTATION,
        JaxRsConstants.JAKARTA_WS_RS_OPTIONS_ANNOTATION,
    ),
}

REQUEST_METHOD_ROLES: Tuple[AnnotationRole, ...] = (
    AnnotationRole.GET,
    AnnotationRole.POST,
    AnnotationRole.PUT,
    AnnotationRole.DELETE,
    AnnotationRole.HEAD,
    AnnotationRole.OPTIONS,
    AnnotationRole.PATCH,
)


def names_for(role: AnnotationRole) -> Tuple[str, ...]:
    """Return the fully-qualified annotation names expressing ``role``."""
    return _ROLE_NAMES[role]


HTTP_METHOD_ANNOTATIONS: Tuple[str, ...] = tuple(
    name for role in REQUEST_METHOD_ROLES for name in names_for(role)
)

KNOWN_ANNOTATIONS: FrozenSet[str] = frozenset(
    name for names in _ROLE_NAMES.values() for name in names
)

JAXRS_PACKAGES: Tuple[str, ...] = (
    JaxRsConstants.JAVAX_WS_RS_PACKAGE,
    JaxRsConstants.JAKARTA_WS_RS_PACKAGE,
)
