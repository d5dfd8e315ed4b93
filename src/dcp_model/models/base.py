"""Wire model base classes and the custom resource envelope."""

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dcp_model.utils import get_logger

logger = get_logger(__name__)


class DcpModel(BaseModel):
    """Base for records exchanged with the orchestrator.

    Python attributes are snake_case, wire keys are lowerCamelCase. Instances
    are immutable and are copied whenever they are placed into another model.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        revalidate_instances="always",
    )

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]):
        """Build an instance from a wire dict."""
        return cls.model_validate(data)


class EnvVar(DcpModel):
    """Environment variable name/value pair."""

    name: str
    value: Optional[str] = None


class ObjectMeta(DcpModel):
    """Minimal object metadata of a custom resource."""

    name: str = ""
    namespace: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None


class ResourceStatus(DcpModel):
    """Generic status shared by all resources."""

    # Human-readable information about the resource state
    message: Optional[str] = None


SpecT = TypeVar("SpecT", bound=DcpModel)
StatusT = TypeVar("StatusT", bound=DcpModel)


class CustomResource(DcpModel, Generic[SpecT, StatusT]):
    """Named resource binding one spec to an optional status.

    The spec cannot be reassigned after construction. The status is only ever
    replaced as a whole value.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    api_version: Optional[str] = None
    kind: Optional[str] = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: SpecT = Field(frozen=True)
    status: Optional[StatusT] = None

    @property
    def name(self) -> str:
        """Resource name from metadata."""
        return self.metadata.name

    def replace_status(self, status: Optional[StatusT]) -> None:
        """
        Replace the observed status with a new value.

        Args:
            status: New status, or None to clear it
        """
        self.status = status
        logger.debug(
            "Replaced resource status",
            extra={"kind": self.kind, "resource_name": self.metadata.name},
        )
