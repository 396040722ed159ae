"""
Wire Schemas.

Pydantic models for the request and response bodies of the /api/v1 API.
Field names are snake_case in Python and camelCase on the wire; requests
must be dumped with by_alias=True (APIClient does this).

Only the documented fields are declared. Optional fields may be absent or
null; unknown fields sent by the service are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Applications
# =============================================================================


class ApplicationResponse(WireModel):
    """Application as returned by the service."""

    id: str
    name: str
    description: str | None = None
    owner_email: str
    is_active: bool


class CreateApplicationRequest(WireModel):
    """Body of POST /applications."""

    name: str
    description: str | None = None
    owner_email: str


class UpdateApplicationRequest(WireModel):
    """Body of PUT /applications/{id}."""

    name: str | None = None
    description: str | None = None


# =============================================================================
# Configurations
# =============================================================================


class ConfigurationResponse(WireModel):
    """Configuration entry of one environment."""

    id: str
    key: str
    value: str
    config_type: str = Field(alias="type")
    description: str | None = None
    is_secret: bool
    environment_id: str


class CreateConfigurationRequest(WireModel):
    """Body of POST /configurations."""

    key: str
    value: str
    config_type: str = Field(alias="type")
    description: str | None = None
    is_secret: bool
    environment_id: str


class UpdateConfigurationRequest(WireModel):
    """Body of PUT /configurations/{id}."""

    value: str
    config_type: str = Field(alias="type")
    description: str | None = None
    is_secret: bool


# =============================================================================
# Secrets
# =============================================================================


class SecretResponse(WireModel):
    """Secret metadata; the value is never included."""

    id: str
    key: str
    description: str | None = None
    application_id: str
    environment_id: str | None = None
    rotation_policy: str
    is_active: bool


class SecretWithDecryptedResponse(WireModel):
    """Secret together with its decrypted value."""

    id: str
    key: str
    decrypted_value: str
    application_id: str
    environment_id: str | None = None


class CreateSecretRequest(WireModel):
    """Body of POST /secrets. rotation_policy is forwarded as-is."""

    key: str
    encrypted_value: str
    description: str | None = None
    application_id: str
    environment_id: str | None = None
    rotation_policy: str


class RotateSecretRequest(WireModel):
    """Body of POST /secrets/{id}/rotate."""

    new_encrypted_value: str
    rotated_by: str


class SecretRotationResponse(WireModel):
    """One entry of a secret's rotation history."""

    id: str
    secret_id: str
    secret_key: str
    application_id: str
    environment_id: str | None = None
    previous_version: int | None = None
    new_version: int | None = None
    rotated_by: str
    status: str
    reason: str
    error_message: str | None = None
    rotation_date: str


class RotationStatsResponse(WireModel):
    """Aggregated rotation counters."""

    total_rotations: int
    successful_rotations: int
    failed_rotations: int
    manual_rotations: int
    automatic_rotations: int
    success_rate: float


class ValidationResponse(WireModel):
    """Result of a rotation status validation. Entries and details are opaque."""

    needs_rotation: list[JsonValue]
    expiring_soon: list[JsonValue]
    details: JsonValue
