from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Player:
    """Domain entity: a player registered with an organization."""

    player_id: int
    first_name: str
    last_name: str
    organization: str
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    emergency_contact_relation: Optional[str] = None
    medical_alerts: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def sort_name(self) -> str:
        # Sort key only, never displayed.
        return f"{self.last_name} {self.first_name}"


@dataclass(frozen=True)
class PlayerPage:
    players: list[Player]
    page: int
    page_size: int
    total: int
    total_pages: int
