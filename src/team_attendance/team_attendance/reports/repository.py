from __future__ import annotations

from typing import Protocol, Sequence


class GuardianRepository(Protocol):
    def list_linked_athletes(self, *, guardian_id: str, organization_id: str) -> Sequence[str]:
        """User ids of the athletes the guardian is linked to."""

        raise NotImplementedError
