"""Actor context: the resolved identity behind a search request."""

from dataclasses import dataclass

from app.domain.enums import ActorRole, ApprovalStatus


@dataclass(frozen=True)
class ActorContext:
    """Immutable requester identity, passed explicitly into every search.

    role is the *effective* role: callers resolve approval state before
    building the context (see resolve()).
    """

    role: ActorRole
    id: str | None = None

    @classmethod
    def public(cls, actor_id: str | None = None) -> "ActorContext":
        return cls(role=ActorRole.PUBLIC, id=actor_id)

    @classmethod
    def resolve(
        cls,
        role: str | None,
        approval_status: str | None,
        actor_id: str | None = None,
    ) -> "ActorContext":
        """Build the effective actor from raw claims.

        Unknown roles and any approval status other than 'approved' resolve
        to the public role. Public actors need no approval.

        Args:
            role: Claimed role string (e.g. 'police').
            approval_status: Approval state from the user service.
            actor_id: Optional user identifier.

        Returns:
            ActorContext with the effective role.
        """
        try:
            claimed = ActorRole(role) if role else ActorRole.PUBLIC
        except ValueError:
            return cls.public(actor_id)
        if claimed.is_professional and approval_status != ApprovalStatus.APPROVED.value:
            return cls.public(actor_id)
        return cls(role=claimed, id=actor_id)
