from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

UNINSTALLED_STATUS = "uninstalled"


class Container(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: Optional[str] = None
    container_id: Optional[str] = Field(default=None, alias="containerId")
    ports: Optional[str] = None
    command: Optional[str] = None
    networks: Optional[str] = None
    filesystem: Optional[str] = None
    image: Optional[str] = None
    running_for: Optional[str] = Field(default=None, alias="runningFor")
    state: Optional[str] = None
    status: Optional[str] = None
    project: Optional[str] = None
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")


class ContainerGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    project: str = Field(min_length=1)
    containers: List[Container] = Field(default_factory=list)


class ContainerParent(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    id: Optional[Union[str, int]] = None


class OperationStatus(str, Enum):
    UNSUPPORTED = "unsupported"


class OperationResult(BaseModel):
    """Outcome of a container operation such as stop or remove."""

    operation: str
    status: OperationStatus
    container_id: Optional[str] = None
    message: Optional[str] = None

    @property
    def supported(self) -> bool:
        return self.status is not OperationStatus.UNSUPPORTED
