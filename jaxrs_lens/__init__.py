"""
JAX-RS Lens - REST endpoint discovery for JAX-RS and Jakarta RESTful Web Services.

This package finds the resource methods of a Java codebase, resolves their HTTP
method and URL (application path, class path and method path) and computes
where a URL code lens is anchored in the source.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Public API
from jaxrs_lens.analyzers.analyzer_factory import AnalyzerFactory
from jaxrs_lens.jaxrs.endpoint_url_builder import build_url
from jaxrs_lens.jaxrs.path_composer import compose
from jaxrs_lens.lens.codelens_provider import JaxRsCodeLensProvider, JavaCodeLensParams
from jaxrs_lens.models.domain_models import EndpointDescriptor, HttpMethod

__all__ = [
    "AnalyzerFactory",
    "EndpointDescriptor",
    "HttpMethod",
    "JavaCodeLensParams",
    "JaxRsCodeLensProvider",
    "build_url",
    "compose",
]
