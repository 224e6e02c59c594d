"""Domain entity describing the principal performing an action."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """Authenticated principal and request metadata supplied by the caller."""

    id: int | None
    username: str | None
    role: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None

    def is_admin(self) -> bool:
        """Return ``True`` when the actor holds the administrator role."""

        return (self.role or "").lower() == "admin"


__all__ = ["Actor"]
