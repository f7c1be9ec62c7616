"""
Base model classes for SkillMatch data models.

Provides common configuration shared across all models.
"""

from pydantic import BaseModel, ConfigDict


class EmbeddedModel(BaseModel):
    """
    Base model for engine inputs and outputs.

    Instances are frozen so scoring can never mutate caller-owned data.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
    )
