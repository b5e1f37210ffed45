"""Cluster identity choice.

The identity of a cluster is one of a closed set of variants:
- UnsetIdentity: no choice made yet (buildable, not deployable)
- ManagedIdentity: system-assigned managed identity (MSI)
- ServicePrincipal: an existing service principal, by client ID
- ConflictingIdentity: more than one different choice was made

Choices are combined with ``merge_identity``, which does not depend on the
order the choices were made in.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field


class UnsetIdentity(BaseModel):
    """No identity chosen."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Literal["unset"] = Field(default="unset", description="Identity discriminator")

    def describe(self) -> str:
        return "unset"


class ManagedIdentity(BaseModel):
    """System-assigned managed identity; no credential is needed."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Literal["managed_identity"] = Field(
        default="managed_identity",
        description="Identity discriminator",
    )

    def describe(self) -> str:
        return "managed identity"


class ServicePrincipal(BaseModel):
    """Existing service principal referenced by client ID.

    The secret is never part of the configuration; it is supplied at
    deployment time through a generated template parameter.

    Attributes:
        client_id: Service principal application (client) ID.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Literal["service_principal"] = Field(
        default="service_principal",
        description="Identity discriminator",
    )
    client_id: str = Field(
        ...,
        min_length=1,
        description="Service principal client ID",
    )

    def describe(self) -> str:
        return f"service principal '{self.client_id}'"


class ConflictingIdentity(BaseModel):
    """Two or more different identity choices were made.

    Attributes:
        choices: Every distinct choice, sorted by description.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Literal["conflicting"] = Field(
        default="conflicting",
        description="Identity discriminator",
    )
    choices: tuple[ManagedIdentity | ServicePrincipal, ...] = Field(
        ...,
        min_length=2,
        description="Distinct identity choices",
    )

    def describe(self) -> str:
        return " and ".join(choice.describe() for choice in self.choices)


IdentityMode = Annotated[
    UnsetIdentity | ManagedIdentity | ServicePrincipal | ConflictingIdentity,
    Discriminator("mode"),
]
"""Cluster identity with discriminated union on the "mode" field."""


def _choices(identity: IdentityMode) -> tuple[ManagedIdentity | ServicePrincipal, ...]:
    if isinstance(identity, UnsetIdentity):
        return ()
    if isinstance(identity, ConflictingIdentity):
        return identity.choices
    return (identity,)


def merge_identity(current: IdentityMode, incoming: IdentityMode) -> IdentityMode:
    """Combine two identity choices.

    Unset is the identity element; repeating the same choice is a no-op;
    any two different choices produce a ConflictingIdentity.

    Example:
        >>> merge_identity(UnsetIdentity(), ManagedIdentity())
        ManagedIdentity(mode='managed_identity')
    """
    distinct: list[ManagedIdentity | ServicePrincipal] = []
    for choice in (*_choices(current), *_choices(incoming)):
        if choice not in distinct:
            distinct.append(choice)

    if not distinct:
        return UnsetIdentity()
    if len(distinct) == 1:
        return distinct[0]
    return ConflictingIdentity(choices=tuple(sorted(distinct, key=lambda c: c.describe())))
