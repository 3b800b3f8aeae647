from dataclasses import dataclass


@dataclass
class Users:
    """Login account placeholder. No endpoint reads or writes users yet."""

    id: int
    username: str
    password: str  # pbkdf2_sha256 hash

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
