"""Domain entity for user accounts."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


@dataclass
class User:
    """A registered account. Only the bcrypt hash of the password is kept."""

    username: str
    password_hash: str
    sex: Sex
    age: int
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
