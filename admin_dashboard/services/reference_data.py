"""Services for divisions, positions and roles.

These are thin passthroughs to their repositories plus uniqueness checks.
Deleting follows the referential guard in ``ReferenceRepository.delete``:
rows still referenced by users are deactivated instead of removed, and the
caller gets the same success either way.
"""
import logging

from sqlalchemy.orm import Session

from admin_dashboard.exceptions import DuplicateField, NotFound
from admin_dashboard.models.division import Division
from admin_dashboard.models.position import Position
from admin_dashboard.models.role import Role
from admin_dashboard.repositories.base import DeleteOutcome
from admin_dashboard.repositories.division_repository import DivisionRepository
from admin_dashboard.repositories.position_repository import PositionRepository
from admin_dashboard.repositories.role_repository import RoleRepository
from admin_dashboard.schemas.common import PaginatedResponse
from admin_dashboard.schemas.division import CodedRequest, CodedResponse
from admin_dashboard.schemas.role import RoleRequest, RoleResponse

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def normalize_paging(page: int, limit: int):
    """Fall back to the defaults for non-positive page or limit values."""
    if page < 1:
        page = DEFAULT_PAGE
    if limit < 1:
        limit = DEFAULT_LIMIT
    return page, limit


class ReferenceDataService:
    """Common read and delete operations over a ``ReferenceRepository``."""
    label = "Record"
    response_schema = CodedResponse

    def __init__(self, repository):
        self.repository = repository

    def get(self, entity_id: int):
        entity = self.repository.find_by_id(entity_id)
        if not entity:
            raise NotFound(f"{self.label} not found")
        return entity

    def delete(self, entity_id: int) -> DeleteOutcome:
        entity = self.get(entity_id)
        return self.repository.delete(entity)

    def list(self, page: int, limit: int, search: str = None) -> PaginatedResponse:
        page, limit = normalize_paging(page, limit)
        result = self.repository.list(page, limit, search)
        return PaginatedResponse[self.response_schema](
            total_items=result.total_items,
            total_pages=result.total_pages,
            current_page=result.current_page,
            page_size=result.page_size,
            items=[self.response_schema.model_validate(item) for item in result.items],
        )

    def list_all(self):
        return self.repository.list_all()


class CodedEntityService(ReferenceDataService):
    """Divisions and positions: unique code plus a display name."""
    model = None

    def create(self, request: CodedRequest, created_by: str):
        if self.repository.find_by_code(request.code):
            raise DuplicateField(f"{self.label.lower()} code already exists")

        entity = self.model(code=request.code, name=request.name, is_active=True)
        entity = self.repository.create(entity, created_by)
        logger.info("%s %s created by %s", self.label, entity.code, created_by)
        return entity

    def update(self, entity_id: int, request: CodedRequest, updated_by: str):
        entity = self.get(entity_id)

        if request.code != entity.code:
            existing = self.repository.find_by_code(request.code)
            if existing and existing.id != entity_id:
                raise DuplicateField(f"{self.label.lower()} code already exists")
            entity.code = request.code

        entity.name = request.name
        return self.repository.update(entity, updated_by)


class DivisionService(CodedEntityService):
    label = "Division"
    model = Division

    def __init__(self, db: Session):
        super().__init__(DivisionRepository(db))


class PositionService(CodedEntityService):
    label = "Position"
    model = Position

    def __init__(self, db: Session):
        super().__init__(PositionRepository(db))


class RoleService(ReferenceDataService):
    label = "Role"
    response_schema = RoleResponse

    def __init__(self, db: Session):
        super().__init__(RoleRepository(db))

    def create(self, request: RoleRequest, created_by: str) -> Role:
        if self.repository.find_by_name(request.name):
            raise DuplicateField("role name already exists")

        role = Role(name=request.name, level=request.level, is_active=True)
        role = self.repository.create(role, created_by)
        logger.info("Role %s created by %s", role.name, created_by)
        return role

    def update(self, role_id: int, request: RoleRequest, updated_by: str) -> Role:
        role = self.get(role_id)

        if request.name != role.name:
            existing = self.repository.find_by_name(request.name)
            if existing and existing.id != role_id:
                raise DuplicateField("role name already exists")
            role.name = request.name

        role.level = request.level
        return self.repository.update(role, updated_by)
