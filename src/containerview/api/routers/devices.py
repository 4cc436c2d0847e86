from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from containerview.api.dependencies import get_container_service
from containerview.api.dtos import AccessInfo, AccessResponse, ContainerGroupListResponse, ContainerListResponse
from containerview.api.errors import to_http_exception
from containerview.containers.filters import filter_containers, filter_groups
from containerview.containers.service import ContainerService

router = APIRouter(prefix="/devices", tags=["Devices"])


async def _require_containers(service: ContainerService, device_id: str):
    if not await service.can_view_container_list(device_id):
        raise HTTPException(status_code=403, detail=f"Device {device_id} has no containers")


@router.get("/{device_id}/access", response_model=AccessResponse)
async def get_device_access(device_id: str, service: ContainerService = Depends(get_container_service)):
    try:
        visible = await service.can_view_container_list(device_id)
        return AccessResponse(data=AccessInfo(visible=visible))
    except Exception as e:
        raise to_http_exception(e, f"checking container access for device {device_id}")


@router.get("/{device_id}/containers", response_model=ContainerListResponse)
async def list_device_containers(
    device_id: str,
    q: Optional[str] = Query(None, description="Search query"),
    include_groups: bool = Query(False, description="Include containers belonging to a project"),
    service: ContainerService = Depends(get_container_service),
):
    try:
        await _require_containers(service, device_id)
        containers = await service.get_containers(device_id)
        return ContainerListResponse(data=filter_containers(containers, include_groups, q))
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, f"listing containers of device {device_id}")


@router.get("/{device_id}/container-groups", response_model=ContainerGroupListResponse)
async def list_device_container_groups(
    device_id: str,
    q: Optional[str] = Query(None, description="Search query"),
    service: ContainerService = Depends(get_container_service),
):
    try:
        await _require_containers(service, device_id)
        groups = await service.get_container_groups(device_id)
        return ContainerGroupListResponse(data=filter_groups(groups, q))
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, f"listing container groups of device {device_id}")
