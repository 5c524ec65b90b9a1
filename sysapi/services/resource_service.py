"""Resource repository: CRUD over the self-referencing resource table."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sysapi.core.exceptions import BusinessError, ErrorCode, InvalidInputError
from sysapi.core.validation import require_has_text
from sysapi.models import Resource
from sysapi.schemas.resource import ResourceCreate, ResourceRecord, ResourceUpdate

logger = logging.getLogger(__name__)


def update_values(record: ResourceUpdate) -> dict:
    return {
        Resource.name: record.name,
        Resource.type: record.type,
        Resource.permission: record.permission,
        Resource.parent_id: record.parent_id,
        Resource.icon: record.icon,
        Resource.url: record.url,
    }


class ResourceService:
    """Issues the resource statements for one request-scoped session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self) -> list[ResourceRecord]:
        rows = self.db.query(Resource).order_by(Resource.id).all()
        return [ResourceRecord.model_validate(r) for r in rows]

    def get_by_id(self, resource_id: int) -> ResourceRecord | None:
        row = self.db.get(Resource, resource_id)
        return ResourceRecord.model_validate(row) if row is not None else None

    def save(self, record: ResourceCreate) -> int:
        """Insert and return the generated id. An unknown parentId is a 400."""
        require_has_text(record.name, "name must not be blank")
        row = Resource(
            name=record.name,
            type=record.type,
            permission=record.permission,
            parent_id=record.parent_id,
            icon=record.icon,
            url=record.url,
        )
        self.db.add(row)
        self._commit_parent_checked()
        self.db.refresh(row)
        logger.info("Created resource id=%s name=%s", row.id, row.name)
        return row.id

    def modify(self, record: ResourceUpdate) -> int:
        """Full overwrite; BusinessError(RECORD_NOT_FOUND) when the id is unknown."""
        require_has_text(record.name, "name must not be blank")
        if record.parent_id is not None and record.parent_id == record.id:
            raise InvalidInputError("A resource cannot be its own parent")
        try:
            count = (
                self.db.query(Resource)
                .filter(Resource.id == record.id)
                .update(update_values(record), synchronize_session=False)
            )
        except IntegrityError as e:
            self.db.rollback()
            raise InvalidInputError("Invalid parent reference") from e
        if count == 0:
            self.db.rollback()
            raise BusinessError(ErrorCode.RECORD_NOT_FOUND, "Record does not exist")
        self._commit_parent_checked()
        return count

    def delete(self, resource_id: int) -> int:
        """Delete by id; 0 when absent. Rows that still have children are refused."""
        try:
            count = (
                self.db.query(Resource)
                .filter(Resource.id == resource_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise BusinessError(
                ErrorCode.RESOURCE_IN_USE, "Resource still has child resources"
            ) from e
        return count

    def _commit_parent_checked(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise InvalidInputError("Invalid parent reference") from e
