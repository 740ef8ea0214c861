"""Itinerary domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from roam.domain.error import InvalidArgumentError, NotAuthorizedError, NotFoundError
from roam.domain.model import Itinerary
from roam.domain.repository import ItineraryRepository
from roam.domain.value import ItineraryId, UserId

from .base import Service


class ItineraryService(Service):
    """Domain service for itinerary operations.

    Owns itinerary records and their collaborator sets.
    """

    def __init__(self, itinerary_repository: ItineraryRepository) -> None:
        """Initialize itinerary service.

        Args:
            itinerary_repository: Itinerary repository
        """
        self.itinerary_repository = itinerary_repository

    async def create(self, author_id: UserId, content: str) -> Itinerary:
        """Create an itinerary with no collaborators.

        Args:
            author_id: Author's user ID
            content: Free-form plan text

        Returns:
            Created itinerary
        """
        with logfire.span("itinerary_service.create", author_id=str(author_id)):
            now = datetime.now()
            itinerary = Itinerary(
                id=ItineraryId(uuid4()),
                author_id=author_id,
                collaborators=frozenset(),
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.itinerary_repository.save(itinerary)
            logfire.info("Itinerary created", itinerary_id=str(saved.id))
            return saved

    async def get_by_id(self, itinerary_id: ItineraryId) -> Itinerary:
        """Get an itinerary by ID.

        Raises:
            NotFoundError: If itinerary not found
        """
        with logfire.span(
            "itinerary_service.get_by_id", itinerary_id=str(itinerary_id)
        ):
            itinerary = await self.itinerary_repository.find_by_id(itinerary_id)
            if not itinerary:
                logfire.warn("Itinerary not found", itinerary_id=str(itinerary_id))
                raise NotFoundError("Itinerary", str(itinerary_id))
            return itinerary

    async def find_by_id(self, itinerary_id: ItineraryId) -> Itinerary | None:
        """Look up an itinerary without treating absence as an error."""
        return await self.itinerary_repository.find_by_id(itinerary_id)

    async def get_all_ordered_by_recency(self) -> list[Itinerary]:
        """List all itineraries, newest first."""
        with logfire.span("itinerary_service.get_all_ordered_by_recency"):
            itineraries = await self.itinerary_repository.find_all()
            logfire.info("Itineraries listed", count=len(itineraries))
            return itineraries

    async def get_by_author(self, author_id: UserId) -> list[Itinerary]:
        """List an author's itineraries, newest first."""
        with logfire.span("itinerary_service.get_by_author", author_id=str(author_id)):
            return await self.itinerary_repository.find_by_author(author_id)

    async def update(
        self,
        itinerary_id: ItineraryId,
        new_content: str | None = None,
        new_collaborator: UserId | None = None,
    ) -> Itinerary:
        """Update content and/or add a collaborator.

        Adding a user who is already a collaborator is a no-op for the
        collaborator set. Every successful call refreshes updated_at.

        Content and updated_at are written first, then the collaborator is
        added in its own write. If the collaborator write fails, the
        content change stays committed and the error propagates.

        Args:
            itinerary_id: Itinerary ID
            new_content: Replacement content
            new_collaborator: User to add to the collaborator set

        Returns:
            Updated itinerary

        Raises:
            InvalidArgumentError: If neither content nor collaborator is given
            NotFoundError: If itinerary not found
        """
        with logfire.span(
            "itinerary_service.update",
            itinerary_id=str(itinerary_id),
            has_content=new_content is not None,
            new_collaborator=str(new_collaborator) if new_collaborator else None,
        ):
            if new_content is None and new_collaborator is None:
                raise InvalidArgumentError(
                    f"Nothing to update on itinerary {itinerary_id}: "
                    "provide content or a collaborator"
                )

            current = await self.get_by_id(itinerary_id)

            changes: dict[str, object] = {"updated_at": datetime.now()}
            if new_content is not None:
                # Validate on a copy before anything is written
                Itinerary.model_validate(
                    {**current.model_dump(), "content": new_content}
                )
                changes["content"] = new_content

            updated = await self.itinerary_repository.update(itinerary_id, changes)
            if updated is None:
                # Deleted between the existence check and the write
                logfire.warn(
                    "Itinerary vanished during update", itinerary_id=str(itinerary_id)
                )
                raise NotFoundError("Itinerary", str(itinerary_id))

            if new_collaborator is not None:
                added = await self.itinerary_repository.add_collaborator(
                    itinerary_id, new_collaborator
                )
                if added:
                    logfire.info(
                        "Collaborator added",
                        itinerary_id=str(itinerary_id),
                        user_id=str(new_collaborator),
                    )
                else:
                    logfire.info(
                        "Collaborator already present",
                        itinerary_id=str(itinerary_id),
                        user_id=str(new_collaborator),
                    )

                # Reload so the result carries collaborators added concurrently
                updated = await self.get_by_id(itinerary_id)

            logfire.info("Itinerary updated", itinerary_id=str(itinerary_id))
            return updated

    async def delete(self, itinerary_id: ItineraryId) -> None:
        """Delete an itinerary.

        Safe to repeat. Posts that reference the itinerary are left as they
        are and project with no itinerary.
        """
        with logfire.span("itinerary_service.delete", itinerary_id=str(itinerary_id)):
            deleted = await self.itinerary_repository.delete(itinerary_id)
            logfire.info(
                "Itinerary deleted" if deleted else "Itinerary already absent",
                itinerary_id=str(itinerary_id),
            )

    async def assert_editable(self, itinerary_id: ItineraryId, user_id: UserId) -> None:
        """Check that a user may edit an itinerary.

        Raises:
            NotFoundError: If itinerary not found
            NotAuthorizedError: If the user is neither author nor collaborator
        """
        itinerary = await self.get_by_id(itinerary_id)
        if not itinerary.can_edit(user_id):
            logfire.warn(
                "Unauthorized itinerary edit attempt",
                itinerary_id=str(itinerary_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("itinerary", str(itinerary_id), str(user_id))

    async def assert_author(self, itinerary_id: ItineraryId, user_id: UserId) -> None:
        """Check that a user wrote an itinerary.

        Raises:
            NotFoundError: If itinerary not found
            NotAuthorizedError: If the user is not the author
        """
        itinerary = await self.get_by_id(itinerary_id)
        if not itinerary.is_author(user_id):
            logfire.warn(
                "Non-author itinerary action attempt",
                itinerary_id=str(itinerary_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError(
                "itinerary", str(itinerary_id), str(user_id), action="delete"
            )
