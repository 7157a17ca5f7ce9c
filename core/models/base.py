# =============================================================================
# core/models/base.py - Shared Model Configuration
# =============================================================================
# JSON on the wire uses camelCase ("createdAt", "jwtSecret"), Python code uses
# snake_case. Every model accepts both and serializes with the camelCase alias.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FrozenCamelModel(CamelModel):
    """Immutable variant, used for configuration values."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
