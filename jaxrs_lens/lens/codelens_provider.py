"""
URL code lenses for JAX-RS resource methods.

Every resource method gets a lens showing its URL on the line after its
last annotation. Only @GET methods carry the open-URI command, the other
lenses are informative.
"""
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from jaxrs_lens.analyzers.java_model import JavaCompilationUnit, JavaMethod, JavaProject, JavaType
from jaxrs_lens.config.config import Configs, configs
from jaxrs_lens.jaxrs.endpoint_url_builder import build_url
from jaxrs_lens.jaxrs.http_method_classifier import is_endpoint_method, is_request_method
from jaxrs_lens.models.domain_models import CodeLens, Command, EndpointDescriptor, Range
from jaxrs_lens.models.source_model import SourceElement
from jaxrs_lens.utils.exceptions import ModelAccessError


class JavaCodeLensParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    uri: str
    url_code_lens_enabled: bool = Field(default_factory=lambda: configs.URL_CODE_LENS_ENABLED,
                                        alias="urlCodeLensEnabled")
    open_uri_command: Optional[str] = Field(default=None, alias="openURICommand")
    local_server_port: Optional[int] = Field(default=None, alias="localServerPort")


def to_code_lens(descriptor: EndpointDescriptor, open_uri_command: Optional[str] = None) -> CodeLens:
    position = descriptor.anchor_position
    url = descriptor.resolved_url
    command_id = (open_uri_command or "") if descriptor.is_primary else ""
    return CodeLens(
        range=Range(position, position),
        command=Command(title=url, command=command_id, arguments=[url]),
    )


class JaxRsCodeLensProvider:

    def __init__(self, settings: Configs = None):
        self.settings = settings or configs

    def collect(self, unit: JavaCompilationUnit, params: JavaCodeLensParams,
                application_element: Optional[SourceElement] = None) -> List[CodeLens]:
        if not params.url_code_lens_enabled:
            return []

        base_url = self.settings.base_url_for(params.local_server_port)
        open_uri_command = params.open_uri_command
        if open_uri_command is None:
            open_uri_command = self.settings.OPEN_URI_COMMAND_ID

        return [
            to_code_lens(descriptor, open_uri_command)
            for descriptor in self.collect_endpoints(unit, base_url, application_element)
        ]

    def collect_endpoints(self, unit: JavaCompilationUnit, base_url: Optional[str],
                          application_element: Optional[SourceElement] = None) -> List[EndpointDescriptor]:
        try:
            types = list(unit.iter_types())
        except ModelAccessError as e:
            logger.warning(f"Skipping {unit.file_path}: {e}")
            return []

        descriptors = []
        for java_type in types:
            for method in java_type.methods:
                descriptor = self._resolve_endpoint(base_url, java_type, method, application_element)
                if descriptor:
                    descriptors.append(descriptor)
        return descriptors

    def collect_project_endpoints(self, project: JavaProject, base_url: Optional[str]) -> List[EndpointDescriptor]:
        try:
            application_element = project.find_application_class()
        except ModelAccessError as e:
            logger.warning(f"Cannot look up the @ApplicationPath class: {e}")
            application_element = None

        if application_element is not None:
            logger.info(f"Using application class {application_element.fully_qualified_name}")

        descriptors = []
        for unit in project.units:
            descriptors.extend(self.collect_endpoints(unit, base_url, application_element))
        logger.info(f"Found {len(descriptors)} endpoints in {len(project.units)} files")
        return descriptors

    def _resolve_endpoint(self, base_url: Optional[str], java_type: JavaType, method: JavaMethod,
                          application_element: Optional[SourceElement]) -> Optional[EndpointDescriptor]:
        try:
            descriptor = build_url(base_url, java_type, method, application_element)
            if descriptor is None and not is_endpoint_method(method) and is_request_method(method):
                logger.debug(f"{method!r} only declares @OPTIONS, no URL lens")
            return descriptor
        except ModelAccessError as e:
            logger.warning(f"Skipping {method!r}: {e}")
            return None
