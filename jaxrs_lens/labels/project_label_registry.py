"""
Registry of the project label providers.

Providers are the built-in ones plus those contributed by installed
distributions through the ``jaxrs_lens.project_label_providers`` entry-point
group. They are loaded once, on first use.
"""
import threading
from importlib import metadata
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from loguru import logger

from jaxrs_lens.analyzers.java_model import JavaProject
from jaxrs_lens.labels.project_label_provider import (
    JaxRsProjectLabelProvider,
    ProjectLabelDefinition,
    ProjectLabelProvider,
)

ENTRY_POINT_GROUP = "jaxrs_lens.project_label_providers"

_BUILTIN_PROVIDERS: Dict[str, Callable[[], ProjectLabelProvider]] = {
    "jaxrs": JaxRsProjectLabelProvider,
}


class ProjectLabelRegistry:

    def __init__(self, builtin_providers: Optional[Dict[str, Callable[[], ProjectLabelProvider]]] = None,
                 entry_point_group: Optional[str] = ENTRY_POINT_GROUP):
        self._builtin_providers = _BUILTIN_PROVIDERS if builtin_providers is None else builtin_providers
        self._entry_point_group = entry_point_group
        self._project_label_definitions: List[ProjectLabelDefinition] = []
        self._project_definitions_loaded = False
        self._lock = threading.Lock()

    @staticmethod
    def get_instance() -> "ProjectLabelRegistry":
        return _INSTANCE

    def get_project_label_definitions(self) -> List[ProjectLabelDefinition]:
        """Returns the project label definitions, loading them on first call."""
        self._load_project_label_definitions()
        return list(self._project_label_definitions)

    def get_project_labels(self, project: JavaProject) -> List[str]:
        labels = []
        for definition in self.get_project_label_definitions():
            for label in definition.get_project_labels(project):
                if label not in labels:
                    labels.append(label)
        return labels

    def _load_project_label_definitions(self) -> None:
        with self._lock:
            if self._project_definitions_loaded:
                return
            # Set first: a provider failing below must not trigger a reload
            self._project_definitions_loaded = True

            for name, factory in self._iter_provider_factories():
                self._add_project_label_definition(name, factory)
            logger.debug(f"Loaded {len(self._project_label_definitions)} project label providers")

    def _iter_provider_factories(self) -> Iterable[Tuple[str, Callable[[], object]]]:
        yield from self._builtin_providers.items()
        for entry in self._iter_entry_points():
            yield entry.name, entry.load

    def _add_project_label_definition(self, name: str, factory: Callable[[], object]) -> None:
        try:
            provider = _coerce_provider(factory())
            self._project_label_definitions.append(ProjectLabelDefinition(provider, name))
        except Exception as e:
            logger.error(f"Error while collecting project label provider '{name}': {e}")

    def _iter_entry_points(self) -> Iterable[metadata.EntryPoint]:
        if not self._entry_point_group:
            return []
        try:
            return list(metadata.entry_points(group=self._entry_point_group))
        except Exception as e:
            logger.error(f"Error while listing '{self._entry_point_group}' entry points: {e}")
            return []


def _coerce_provider(obj: object) -> ProjectLabelProvider:
    # entry points may reference a provider class, a factory or an instance
    if isinstance(obj, type) or (callable(obj) and not hasattr(obj, "get_project_labels")):
        obj = obj()
    if hasattr(obj, "get_project_labels"):
        return obj
    raise TypeError(f"{obj!r} is not a project label provider")


_INSTANCE = ProjectLabelRegistry()
