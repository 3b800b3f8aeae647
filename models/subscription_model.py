from dataclasses import dataclass
from datetime import datetime


def parse_timestamp(value):
    # fromisoformat only accepts a trailing "Z" from Python 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass(frozen=True)
class EmailSubscription:
    """One collected email address from the signup form."""

    id: int
    email: str
    created_at: datetime

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "createdAt": self.created_at.isoformat()
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=int(data["id"]),
            email=data["email"],
            created_at=parse_timestamp(data["createdAt"])
        )

    def __repr__(self):
        return f"<EmailSubscription(id={self.id}, email='{self.email}')>"
