from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Team:
    """Domain entity: a team inside an organization."""

    team_id: int
    name: str
    organization: str
    division: Optional[str] = None
    age_group: Optional[str] = None
    skill_level: Optional[str] = None
    description: Optional[str] = None
