"""Actor lookup and organization access checks shared by use cases."""

from uuid import UUID

from campdesk.application.ports import UnitOfWork
from campdesk.domain.entities import User
from campdesk.domain.exceptions import PermissionDenied
from campdesk.domain.value_objects import UserRole


async def load_actor(uow: UnitOfWork, actor_id: str) -> User:
    """Load the calling user by auth subject."""
    actor = await uow.users.get_by_subject(actor_id)
    if not actor:
        raise PermissionDenied("Unknown user")
    return actor


def ensure_member(actor: User, organization_id: UUID) -> None:
    if actor.organization_id is None or actor.organization_id != organization_id:
        raise PermissionDenied("User is not a member of this organization")


def ensure_permission_admin(actor: User, organization_id: UUID) -> None:
    """Permission sets and assignments are managed by the organization's camp creators."""
    ensure_member(actor, organization_id)
    if actor.role != UserRole.CAMP_CREATOR:
        raise PermissionDenied("Only camp creators can manage permissions")
