from typing import List, Optional

from pydantic import BaseModel

from containerview.containers.models import (
    Container,
    ContainerGroup,
    ContainerParent,
    OperationResult,
)


class BaseResponse(BaseModel):
    status: str = "success"
    message: Optional[str] = None


class ErrorResponse(BaseResponse):
    status: str = "error"


class ContainerDetail(BaseModel):
    container: Container
    parent: ContainerParent


class AccessInfo(BaseModel):
    visible: bool
    service_type: Optional[str] = None


class VersionInfo(BaseModel):
    version: str


class ContainerListResponse(BaseResponse):
    data: List[Container]


class ContainerGroupListResponse(BaseResponse):
    data: List[ContainerGroup]


class ContainerDetailResponse(BaseResponse):
    data: ContainerDetail


class AccessResponse(BaseResponse):
    data: AccessInfo


class OperationResponse(BaseResponse):
    data: OperationResult


class VersionResponse(BaseResponse):
    data: VersionInfo
