"""Linux node profile configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LinuxProfileConfig(BaseModel):
    """Admin account and SSH keys installed on Linux nodes.

    Attributes:
        admin_username: Admin user created on every node.
        ssh_public_keys: Public keys for the admin user. Duplicates are
            dropped; first-seen order is kept.

    Example:
        >>> profile = LinuxProfileConfig(
        ...     admin_username="aksuser",
        ...     ssh_public_keys=["ssh-rsa AAAA..."],
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    admin_username: str = Field(
        ...,
        min_length=1,
        description="Admin username on cluster nodes",
    )
    ssh_public_keys: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="SSH public keys for the admin user",
    )

    @field_validator("ssh_public_keys")
    @classmethod
    def dedupe_keys(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Drop duplicate and blank keys, keeping first-seen order."""
        keys = tuple(dict.fromkeys(key.strip() for key in v))
        if any(not key for key in keys):
            raise ValueError("SSH public keys cannot be empty")
        return keys
