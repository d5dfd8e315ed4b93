"""Application-model annotations consumed when creating orchestrator resources."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Type, TypeVar

from .enums import RestartPolicy


class AppRestartPolicy(Enum):
    """Restart policy as declared in the application model."""

    ALWAYS = "Always"
    NEVER = "Never"
    ON_FAILURE = "OnFailure"
    UNLESS_STOPPED = "UnlessStopped"


class ResourceAnnotation:
    """Base class for annotations attached to an application resource."""

    pass


@dataclass(frozen=True)
class RestartPolicyAnnotation(ResourceAnnotation):
    """Declares how the container runtime should restart the container."""

    restart_policy: AppRestartPolicy


_RESTART_POLICY_MAP = {
    AppRestartPolicy.ALWAYS: RestartPolicy.ALWAYS,
    AppRestartPolicy.NEVER: RestartPolicy.NO,
    AppRestartPolicy.ON_FAILURE: RestartPolicy.ON_FAILURE,
    AppRestartPolicy.UNLESS_STOPPED: RestartPolicy.UNLESS_STOPPED,
}

AnnotationT = TypeVar("AnnotationT", bound=ResourceAnnotation)


def find_annotation(
    annotations: Iterable[ResourceAnnotation], annotation_type: Type[AnnotationT]
) -> Optional[AnnotationT]:
    """Return the first annotation of the given type, or None."""
    for annotation in annotations:
        if isinstance(annotation, annotation_type):
            return annotation
    return None


def resolve_restart_policy(annotations: Iterable[ResourceAnnotation]) -> RestartPolicy:
    """
    Resolve the runtime restart policy for a managed container.

    Containers without a RestartPolicyAnnotation restart always. An annotation
    carrying a value outside AppRestartPolicy resolves to "no".

    Args:
        annotations: Annotations of the application resource (not modified)

    Returns:
        Restart policy for the ContainerSpec
    """
    annotation = find_annotation(annotations, RestartPolicyAnnotation)
    if annotation is None:
        return RestartPolicy.ALWAYS
    return _RESTART_POLICY_MAP.get(annotation.restart_policy, RestartPolicy.NO)
