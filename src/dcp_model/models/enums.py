"""Closed value sets used by the container resource model and their canonicalizers."""

import socket
from enum import Enum, IntEnum
from typing import Any, Union

from dcp_model.utils import get_logger
from dcp_model.utils.exceptions import InvalidArgumentError

logger = get_logger(__name__)

# Exit code reported while the container is running or the code is not known
UNKNOWN_EXIT_CODE = -1


class PortProtocol(str, Enum):
    """Network protocol of an exposed port, in wire form."""

    TCP = "TCP"
    UDP = "UDP"


class TransportProtocol(IntEnum):
    """Transport protocol identified by its IP protocol number."""

    TCP = socket.IPPROTO_TCP
    UDP = socket.IPPROTO_UDP


class RestartPolicy(str, Enum):
    """Container restart policy understood by the container runtime."""

    NO = "no"
    ON_FAILURE = "on-failure"
    UNLESS_STOPPED = "unless-stopped"
    ALWAYS = "always"


class VolumeMountType(str, Enum):
    """Kind of volume mount."""

    BIND = "bind"
    VOLUME = "volume"


class ContainerState(str, Enum):
    """Lifecycle state of a container as reported by the orchestrator."""

    # No attempt has been made to run the container yet
    PENDING = "Pending"
    # Image is being built, no container exists yet
    BUILDING = "Building"
    # Pulling images, joining initial networks, etc.
    STARTING = "Starting"
    FAILED_TO_START = "FailedToStart"
    RUNNING = "Running"
    PAUSED = "Paused"
    # Exit code is meaningful only in this state
    EXITED = "Exited"
    STOPPING = "Stopping"
    UNKNOWN = "Unknown"


def canonicalize_protocol(protocol: str) -> str:
    """
    Normalize a port protocol string to its canonical upper-case form.

    Args:
        protocol: Protocol name in any letter case

    Returns:
        "TCP" or "UDP"

    Raises:
        InvalidArgumentError: If the protocol is not TCP or UDP
    """
    if isinstance(protocol, PortProtocol):
        return protocol.value

    canonical = str(protocol).upper()
    if canonical not in (PortProtocol.TCP.value, PortProtocol.UDP.value):
        raise InvalidArgumentError(
            "protocol", protocol, "Port protocol value must be 'TCP' or 'UDP'"
        )
    return canonical


def to_transport_protocol(protocol: str) -> TransportProtocol:
    """
    Map a port protocol string to a transport protocol.

    Raises:
        InvalidArgumentError: If the protocol is not TCP or UDP
    """
    canonical = canonicalize_protocol(protocol)
    if canonical == PortProtocol.TCP.value:
        return TransportProtocol.TCP
    return TransportProtocol.UDP


def from_transport_protocol(protocol: Union[TransportProtocol, int]) -> str:
    """
    Map a transport protocol back to its canonical wire string.

    Raises:
        InvalidArgumentError: If the protocol is neither TCP nor UDP
    """
    if protocol == TransportProtocol.TCP:
        return PortProtocol.TCP.value
    if protocol == TransportProtocol.UDP:
        return PortProtocol.UDP.value
    raise InvalidArgumentError("protocol", protocol, "Supported protocols are TCP and UDP")


def coerce_restart_policy(value: Any) -> Any:
    """
    Interpret a restart policy read from the wire.

    Missing (null) values and unrecognized strings fall back to "no" instead
    of failing. Other non-string values are passed through for regular
    validation.
    """
    if isinstance(value, RestartPolicy):
        return value
    if value is None:
        logger.warning("Missing restart policy, defaulting to 'no'")
        return RestartPolicy.NO
    if not isinstance(value, str):
        return value
    try:
        return RestartPolicy(value)
    except ValueError:
        logger.warning(
            "Unrecognized restart policy, defaulting to 'no'",
            extra={"restart_policy": value},
        )
        return RestartPolicy.NO


def coerce_container_state(value: Any) -> Any:
    """
    Interpret a container state read from the wire.

    A null state is read as Pending, unrecognized strings become Unknown.
    """
    if isinstance(value, ContainerState):
        return value
    if value is None:
        logger.warning("Missing container state, treating as Pending")
        return ContainerState.PENDING
    if not isinstance(value, str):
        return value
    try:
        return ContainerState(value)
    except ValueError:
        logger.warning(
            "Unrecognized container state, treating as Unknown",
            extra={"state": value},
        )
        return ContainerState.UNKNOWN


def coerce_volume_mount_type(value: Any) -> Any:
    """
    Interpret a volume mount type read from the wire.

    Matching is case-insensitive. Null and unrecognized values fall back to
    a bind mount.
    """
    if isinstance(value, VolumeMountType):
        return value
    if value is None:
        logger.warning("Missing volume mount type, defaulting to 'bind'")
        return VolumeMountType.BIND
    if not isinstance(value, str):
        return value
    try:
        return VolumeMountType(value.lower())
    except ValueError:
        logger.warning(
            "Unrecognized volume mount type, defaulting to 'bind'",
            extra={"volume_mount_type": value},
        )
        return VolumeMountType.BIND
