"""Resource model for orchestrator-managed containers."""

from .annotations import (
    AppRestartPolicy,
    ResourceAnnotation,
    RestartPolicyAnnotation,
    find_annotation,
    resolve_restart_policy,
)
from .base import CustomResource, DcpModel, EnvVar, ObjectMeta, ResourceStatus
from .containers import (
    BuildContext,
    BuildContextSecret,
    ContainerLabel,
    ContainerNetworkConnection,
    ContainerPortSpec,
    ContainerSpec,
    ContainerStatus,
    VolumeMount,
)
from .enums import (
    UNKNOWN_EXIT_CODE,
    ContainerState,
    PortProtocol,
    RestartPolicy,
    TransportProtocol,
    VolumeMountType,
    canonicalize_protocol,
    from_transport_protocol,
    to_transport_protocol,
)
from .resource import Container

__all__ = [
    "UNKNOWN_EXIT_CODE",
    "AppRestartPolicy",
    "BuildContext",
    "BuildContextSecret",
    "Container",
    "ContainerLabel",
    "ContainerNetworkConnection",
    "ContainerPortSpec",
    "ContainerSpec",
    "ContainerState",
    "ContainerStatus",
    "CustomResource",
    "DcpModel",
    "EnvVar",
    "ObjectMeta",
    "PortProtocol",
    "ResourceAnnotation",
    "ResourceStatus",
    "RestartPolicy",
    "RestartPolicyAnnotation",
    "TransportProtocol",
    "VolumeMount",
    "VolumeMountType",
    "canonicalize_protocol",
    "find_annotation",
    "from_transport_protocol",
    "resolve_restart_policy",
    "to_transport_protocol",
]
