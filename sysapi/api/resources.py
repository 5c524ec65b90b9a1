"""CRUD endpoints for resources."""

from fastapi import APIRouter

from sysapi.api.deps import CurrentSession, ResourceServiceDep
from sysapi.core.exceptions import InvalidInputError, NotFoundError
from sysapi.core.validation import parse_id
from sysapi.schemas.resource import ResourceCreate, ResourceRecord, ResourceUpdate

router = APIRouter()


@router.get("", response_model=list[ResourceRecord], response_model_exclude_none=True)
def list_resources(_session: CurrentSession, service: ResourceServiceDep) -> list[ResourceRecord]:
    return service.list()


@router.get("/{id}", response_model=ResourceRecord, response_model_exclude_none=True)
def get_resource(id: str, service: ResourceServiceDep) -> ResourceRecord:
    resource_id = parse_id(id)
    resource = service.get_by_id(resource_id)
    if resource is None:
        raise NotFoundError("Resource", resource_id)
    return resource


@router.post("", response_model=int)
def create_resource(body: ResourceCreate, service: ResourceServiceDep) -> int:
    return service.save(body)


@router.put("", response_model=int)
def update_resource(body: ResourceUpdate, service: ResourceServiceDep) -> int:
    return service.modify(body)


@router.delete("", response_model=int)
def delete_resource_without_id() -> int:
    raise InvalidInputError("Missing id")


@router.delete("/{id}", response_model=int)
def delete_resource(id: str, service: ResourceServiceDep) -> int:
    return service.delete(parse_id(id))
