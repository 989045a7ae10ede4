"""Registry of invitation types."""

from typing import Iterator

from .invitation_type import InvitationType


class InvitationTypeRegistry:
    """Maps invitation type ids to their InvitationType.

    New kinds of invitations are added by registering another
    implementation; stored records name their type by id and are decoded
    by whatever is registered under it.
    """

    def __init__(self, types: list[InvitationType] | None = None) -> None:
        self._types: dict[str, InvitationType] = {}
        for invitation_type in types or []:
            self.register(invitation_type)

    def register(self, invitation_type: InvitationType) -> None:
        """Register a type.

        Raises:
            ValueError: If another type is already registered under its id
        """
        if invitation_type.id in self._types:
            raise ValueError(
                f"Invitation type already registered: {invitation_type.id}"
            )
        self._types[invitation_type.id] = invitation_type

    def find(self, type_id: str) -> InvitationType | None:
        return self._types.get(type_id)

    def __iter__(self) -> Iterator[InvitationType]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)
