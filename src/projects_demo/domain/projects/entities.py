"""Project entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class Project:
    """
    A project stored in the catalogue.

    Identity and creation time are assigned by the store when the project
    is first persisted; both stay ``None`` on a freshly created instance
    and never change afterwards.
    """

    name: Optional[str]
    description: Optional[str] = None
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    # Row version the instance was loaded at
    version: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def update_details(self, name: Optional[str], description: Optional[str]) -> None:
        """Overwrite the mutable fields, keeping identity and creation time."""
        self.name = name
        self.description = description
