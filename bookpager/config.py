"""Pipeline configuration with environment variable loading.

Pydantic-based configuration for cleaning and pagination. Values default to
environment variables (optionally from a .env file) and are validated on
construction, defaults included.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from bookpager.cleaning.artifact_cleaner import DEFAULT_ARTIFACT_RULES, ArtifactRule
from bookpager.pagination.paginator import DEFAULT_CHUNK_SIZE, DEFAULT_MIN_LENGTH
from bookpager.parsing.pdf_parser import MAX_FILE_SIZE

# Load environment variables from .env file
load_dotenv()


class PipelineConfig(BaseModel):
    """Configuration for the cleaning and pagination pipeline.

    Attributes:
        chunk_size: Characters per page chunk.
        min_length: Minimum trimmed page length kept in the output.
        legacy_split: Pin the first chapter to a fixed page number.
        max_file_size_mb: Largest accepted PDF size in megabytes.
        artifact_rules: Ordered artifact rule table for the cleaner.
    """

    # Environment values arrive as strings; validate them like explicit input
    model_config = ConfigDict(validate_default=True)

    chunk_size: int = Field(
        default_factory=lambda: os.getenv("PAGINATION_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE)),
        ge=1,
        description="Characters per page chunk",
    )
    min_length: int = Field(
        default_factory=lambda: os.getenv("PAGINATION_MIN_LENGTH", str(DEFAULT_MIN_LENGTH)),
        ge=0,
        description="Minimum trimmed page length kept in the output",
    )
    legacy_split: bool = Field(
        default_factory=lambda: os.getenv("PAGINATION_LEGACY_SPLIT", "false"),
        description="Pin the first chapter to a fixed page number",
    )
    max_file_size_mb: float = Field(
        default_factory=lambda: os.getenv("MAX_FILE_SIZE_MB", str(MAX_FILE_SIZE // (1024 * 1024))),
        gt=0,
        description="Largest accepted PDF size in megabytes",
    )
    artifact_rules: tuple[ArtifactRule, ...] = Field(
        default=DEFAULT_ARTIFACT_RULES,
        description="Ordered artifact rule table",
    )

    @field_validator("artifact_rules")
    @classmethod
    def validate_rule_names(cls, v: tuple[ArtifactRule, ...]) -> tuple[ArtifactRule, ...]:
        """Reject blank or duplicate rule names."""
        names = [rule.name for rule in v]
        if any(not name.strip() for name in names):
            raise ValueError("Artifact rule names must be non-empty")
        if len(set(names)) != len(names):
            raise ValueError("Artifact rule names must be unique")
        return v

    @property
    def max_file_size(self) -> int:
        """Largest accepted PDF size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def get_pipeline_config() -> PipelineConfig:
    """Create pipeline configuration from environment.

    Returns:
        Configured PipelineConfig instance.

    Raises:
        ValidationError: If an environment value is malformed or out of range.
    """
    return PipelineConfig()
