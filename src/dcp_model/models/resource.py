"""The Container custom resource."""

from typing import Iterable

from dcp_model.config import get_settings
from dcp_model.utils import get_logger

from .annotations import ResourceAnnotation, resolve_restart_policy
from .base import CustomResource, ObjectMeta
from .containers import ContainerSpec, ContainerStatus
from .enums import ContainerState

logger = get_logger(__name__)

# States in which the runtime has a container object whose logs can be read
_LOG_STATES = frozenset(
    {
        ContainerState.STARTING,
        ContainerState.BUILDING,
        ContainerState.RUNNING,
        ContainerState.PAUSED,
        ContainerState.STOPPING,
        ContainerState.EXITED,
    }
)


class Container(CustomResource[ContainerSpec, ContainerStatus]):
    """Container resource managed by the orchestrator."""

    @classmethod
    def create(
        cls, name: str, image: str, annotations: Iterable[ResourceAnnotation]
    ) -> "Container":
        """
        Create a cluster-scoped Container resource for the given image.

        Args:
            name: Resource name
            image: Image reference
            annotations: Application-model annotations used to pick the restart policy

        Returns:
            New Container without status
        """
        settings = get_settings()
        spec = ContainerSpec(image=image, restart_policy=resolve_restart_policy(annotations))
        container = cls(
            kind=settings.container_kind,
            api_version=settings.group_version,
            metadata=ObjectMeta(name=name, namespace=""),
            spec=spec,
        )

        logger.debug(
            "Created container resource",
            extra={
                "resource_name": name,
                "image": image,
                "restart_policy": spec.restart_policy.value,
            },
        )
        return container

    @property
    def logs_available(self) -> bool:
        """Whether a runtime container exists whose logs can be retrieved."""
        status = self.status
        if status is None:
            return False
        if status.state in _LOG_STATES:
            return True
        return status.state == ContainerState.FAILED_TO_START and status.container_id is not None
