from typing import List, Protocol, Set

from loguru import logger

from jaxrs_lens.analyzers.java_model import JavaProject
from jaxrs_lens.config.jaxrs_constants import JAXRS_PACKAGES, JaxRsConstants


class ProjectLabelProvider(Protocol):
    def get_project_labels(self, project: JavaProject) -> List[str]: ...


class ProjectLabelDefinition:
    """Wraps a provider so that a failing provider yields no labels."""

    def __init__(self, provider: ProjectLabelProvider, name: str = ""):
        self.provider = provider
        self.name = name or type(provider).__name__

    def get_project_labels(self, project: JavaProject) -> List[str]:
        try:
            return list(self.provider.get_project_labels(project) or [])
        except Exception as e:
            logger.error(f"Error while getting project labels from '{self.name}': {e}")
            return []


class JaxRsProjectLabelProvider:
    """Labels projects using JAX-RS: "jaxrs", plus "javax" and/or "jakarta"."""

    JAXRS_LABEL = "jaxrs"
    JAVAX_LABEL = "javax"
    JAKARTA_LABEL = "jakarta"

    def get_project_labels(self, project: JavaProject) -> List[str]:
        namespaces = self._used_namespaces(project)
        if not namespaces:
            return []
        labels = [self.JAXRS_LABEL]
        if JaxRsConstants.JAVAX_WS_RS_PACKAGE in namespaces:
            labels.append(self.JAVAX_LABEL)
        if JaxRsConstants.JAKARTA_WS_RS_PACKAGE in namespaces:
            labels.append(self.JAKARTA_LABEL)
        return labels

    def _used_namespaces(self, project: JavaProject) -> Set[str]:
        namespaces = set()
        for unit in project.units:
            if not unit.is_valid:
                continue
            names = list(unit.import_mapping.values()) + list(unit.wildcard_imports)
            for java_type in unit.iter_types():
                names.extend(a.fully_qualified_name for a in java_type.annotations)
                for method in java_type.methods:
                    names.extend(a.fully_qualified_name for a in method.annotations)
            for name in names:
                for package in JAXRS_PACKAGES:
                    if name == package or name.startswith(package + "."):
                        namespaces.add(package)
        return namespaces
