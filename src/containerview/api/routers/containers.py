from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from containerview.api.dependencies import get_container_service
from containerview.api.dtos import (
    AccessInfo,
    AccessResponse,
    ContainerDetail,
    ContainerDetailResponse,
    OperationResponse,
)
from containerview.api.errors import to_http_exception
from containerview.containers.guards import can_view_container_tab, resolve_service_type
from containerview.containers.service import ContainerService

router = APIRouter(prefix="/containers", tags=["Containers"])


@router.get("/{object_id}", response_model=ContainerDetailResponse)
async def get_one_container(object_id: str, service: ContainerService = Depends(get_container_service)):
    try:
        container, parent = await service.get_container(object_id)
        return ContainerDetailResponse(data=ContainerDetail(container=container, parent=parent))
    except Exception as e:
        raise to_http_exception(e, f"getting container {object_id}")


@router.get("/{object_id}/access", response_model=AccessResponse)
def get_container_tab_access(
    object_id: str,
    service_type: Optional[str] = Query(None, description="Service type of the viewed object"),
    parent_service_type: Optional[str] = Query(None, description="Service type of the enclosing context"),
):
    resolved = resolve_service_type(
        {"serviceType": service_type}, {"serviceType": parent_service_type}
    )
    return AccessResponse(
        data=AccessInfo(visible=can_view_container_tab(resolved), service_type=resolved)
    )


async def _unsupported(object_id: str, operation: str, service: ContainerService):
    try:
        container, _ = await service.get_container(object_id)
    except Exception as e:
        raise to_http_exception(e, f"looking up container {object_id}")

    result = getattr(service, operation)(container)
    response = OperationResponse(status="error", message=result.message, data=result)
    return JSONResponse(status_code=501, content=response.model_dump(mode="json"))


@router.post("/{object_id}/stop", response_model=OperationResponse, status_code=501)
async def stop_one_container(object_id: str, service: ContainerService = Depends(get_container_service)):
    return await _unsupported(object_id, "stop", service)


@router.post("/{object_id}/remove", response_model=OperationResponse, status_code=501)
async def remove_one_container(object_id: str, service: ContainerService = Depends(get_container_service)):
    return await _unsupported(object_id, "remove", service)
