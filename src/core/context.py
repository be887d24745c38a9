"""Authentication context model for the calling owner."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticatedOwnerContext:
    """Identity of the caller as supplied by the identity provider."""

    owner_id: str
    email: str | None = None
    role: str | None = None

    def __post_init__(self):
        if not self.owner_id:
            raise ValueError("owner_id is required in authentication context")
