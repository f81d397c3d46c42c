"""User record owned by the identity service.

Only the fields this service reads (display fields) or bumps (stats) are
modelled here.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel, utcnow
from discuss.domain.value import AuthorProfile, UserId


class User(DomainModel):
    """User as seen by the discussion service."""

    id: UserId
    display_name: str = Field(min_length=1, max_length=255)
    email: Optional[str] = None
    comments_posted: int = Field(default=0, ge=0)
    upvotes_received: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)

    def to_profile(self) -> AuthorProfile:
        return AuthorProfile(id=self.id, display_name=self.display_name, email=self.email)
