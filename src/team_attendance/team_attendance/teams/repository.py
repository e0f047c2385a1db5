from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Team, TeamMember


class TeamRepository(Protocol):
    def get_by_id(self, team_id: str) -> Optional[Team]:
        raise NotImplementedError

    def list_for_organization(self, organization_id: str, *, include_archived: bool = False) -> Sequence[Team]:
        raise NotImplementedError

    def list_members(self, team_id: str, *, athletes_only: bool = False) -> Sequence[TeamMember]:
        """Current team members; `athletes_only` keeps MEMBER and CAPTAIN roles."""

        raise NotImplementedError

    def list_memberships_for_user(self, user_id: str, organization_id: str) -> Sequence[TeamMember]:
        raise NotImplementedError

    def list_organization_memberships(self, organization_id: str) -> Sequence[TeamMember]:
        """Every team membership (all roles) across the organization's teams."""

        raise NotImplementedError
