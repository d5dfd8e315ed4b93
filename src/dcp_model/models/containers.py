"""Desired-state and observed-state records of a managed container."""

import posixpath
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator, model_serializer, model_validator

from .base import DcpModel, EnvVar, ResourceStatus
from .enums import (
    UNKNOWN_EXIT_CODE,
    ContainerState,
    PortProtocol,
    RestartPolicy,
    VolumeMountType,
    canonicalize_protocol,
    coerce_container_state,
    coerce_restart_policy,
    coerce_volume_mount_type,
)


class ContainerLabel(DcpModel):
    """Free-form label applied to a container or image."""

    key: str
    value: str


class BuildContextSecret(DcpModel):
    """Secret mounted into an image build.

    A secret is consumed in a Dockerfile with
    ``RUN --mount=type=secret,id=<id>``. ``type`` is "env" or "file" by
    convention and is passed through unchecked.
    """

    id: str
    type: Optional[str] = None
    # Used when type is "env"
    value: Optional[str] = None
    # Used when type is "file"
    source: Optional[str] = None


class BuildContext(DcpModel):
    """Instructions for building the container image from a Dockerfile."""

    context: str
    dockerfile: Optional[str] = None
    args: Optional[List[EnvVar]] = None
    secrets: Optional[List[BuildContextSecret]] = None
    stage: Optional[str] = None
    tags: Optional[List[str]] = None
    labels: Optional[List[ContainerLabel]] = None

    def dockerfile_path(self) -> str:
        """Dockerfile to build, defaulting to ``Dockerfile`` in the context root."""
        if self.dockerfile:
            return self.dockerfile
        return posixpath.join(self.context, "Dockerfile")


class VolumeMount(DcpModel):
    """Volume mounted into the container."""

    type: VolumeMountType = VolumeMountType.BIND
    # Host directory for bind mounts, volume name for volume mounts
    source: Optional[str] = None
    target: Optional[str] = None
    read_only: bool = False

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> Any:
        return coerce_volume_mount_type(value)


class ContainerPortSpec(DcpModel):
    """Port exposed by the container."""

    host_port: Optional[int] = Field(default=None, gt=0, lt=65536)
    container_port: int = Field(gt=0, lt=65536)
    protocol: PortProtocol = PortProtocol.TCP
    host_ip: Optional[str] = Field(default=None, alias="hostIP")

    @field_validator("protocol", mode="before")
    @classmethod
    def _canonicalize_protocol(cls, value: Any) -> str:
        return canonicalize_protocol(value)


class ContainerNetworkConnection(DcpModel):
    """Attachment of the container to a ContainerNetwork resource.

    The container does not start until it can join every listed network.
    """

    name: str
    # DNS aliases of the container on this network
    aliases: Optional[List[str]] = None


class ContainerSpec(DcpModel):
    """Desired state of a container."""

    # Defaults to the resource name plus a random suffix when not set
    container_name: Optional[str] = None
    image: Optional[str] = None
    # Takes precedence over image when the reconciler builds
    build: Optional[BuildContext] = None
    volume_mounts: Optional[List[VolumeMount]] = None
    ports: Optional[List[ContainerPortSpec]] = None
    env: Optional[List[EnvVar]] = None
    env_files: Optional[List[str]] = None
    restart_policy: RestartPolicy = RestartPolicy.NO
    command: Optional[str] = None
    args: Optional[List[str]] = None
    labels: Optional[List[ContainerLabel]] = None
    run_args: Optional[List[str]] = None
    persistent: Optional[bool] = None
    networks: Optional[List[ContainerNetworkConnection]] = None

    @field_validator("restart_policy", mode="before")
    @classmethod
    def _coerce_restart_policy(cls, value: Any) -> Any:
        return coerce_restart_policy(value)

    def network_names(self) -> List[str]:
        """Names of the networks the container must join before it is ready to start."""
        return [network.name for network in self.networks or []]


class ContainerStatus(DcpModel):
    """Observed state of a container.

    The generic ``message`` lives in an embedded ResourceStatus and is
    flattened into the top level on the wire.
    """

    common: ResourceStatus = Field(default_factory=ResourceStatus)
    container_name: Optional[str] = None
    state: ContainerState = ContainerState.PENDING
    # Set once an attempt to start the container was made
    container_id: Optional[str] = None
    startup_timestamp: Optional[datetime] = None
    finish_timestamp: Optional[datetime] = None
    # Meaningful only when state is Exited
    exit_code: int = UNKNOWN_EXIT_CODE
    effective_env: Optional[List[EnvVar]] = None
    effective_args: Optional[List[str]] = None
    networks: Optional[List[str]] = None

    @model_validator(mode="before")
    @classmethod
    def _lift_message(cls, data: Any) -> Any:
        if isinstance(data, dict) and "message" in data:
            data = dict(data)
            data["common"] = {"message": data.pop("message")}
        return data

    @field_validator("state", mode="before")
    @classmethod
    def _coerce_state(cls, value: Any) -> Any:
        return coerce_container_state(value)

    @model_serializer(mode="wrap")
    def _flatten_message(self, handler) -> Dict[str, Any]:
        data = handler(self)
        data.pop("common", None)
        if self.common.message is not None:
            data["message"] = self.common.message
        return data

    @property
    def message(self) -> Optional[str]:
        """Human-readable information about the container state."""
        return self.common.message

    def with_changes(self, **changes: Any) -> "ContainerStatus":
        """
        Return a new status with the given fields replaced.

        Args:
            **changes: Field values keyed by attribute name. ``message`` is accepted;
                ``common`` replaces the embedded generic status, and an explicit
                ``message`` given alongside it wins

        Returns:
            New ContainerStatus; this instance is left untouched
        """
        data = {
            name: getattr(self, name) for name in type(self).model_fields if name != "common"
        }
        if "common" not in changes:
            data["message"] = self.common.message
        data.update(changes)
        return type(self).model_validate(data)
