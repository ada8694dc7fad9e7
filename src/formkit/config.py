"""Configuration management for formkit using pydantic-settings.

FormKitConfig holds project-wide defaults for processing options. It is
only read when constructed explicitly; the processing functions never load
it on their own. Pass it to ``ProcessingOptions.from_config``.

Settings priority (highest to lowest):
1. Init keyword arguments
2. Environment variables (FORMKIT_* prefix)
3. .env file
4. formkit.yaml project config
5. Default values
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from formkit.schema.models import (
    OutputFormat,
    SchemaModification,
    ValidationStrategy,
    normalize_option,
)

logger = logging.getLogger(__name__)

PROJECT_FILE = "formkit.yaml"

# Map formkit.yaml keys to FormKitConfig field names; short forms are accepted too
_YAML_TO_FIELD = {
    "validation_strategy": "validation_strategy",
    "schema_modification": "schema_modification",
    "output_format": "output_format",
    "use_dynamic_validation": "use_dynamic_validation",
    "exclude_fields": "exclude_fields",
    "strategy": "validation_strategy",
    "modification": "schema_modification",
    "output": "output_format",
    "dynamic_validation": "use_dynamic_validation",
    "exclude": "exclude_fields",
}


class _ProjectYamlSource(PydanticBaseSettingsSource):
    """Read project config from formkit.yaml (lower priority than env vars)."""

    def get_field_value(self, field, field_name):  # type: ignore[override]
        return None, field_name, False

    def __call__(self) -> dict:
        project_file = Path(PROJECT_FILE)
        if not project_file.exists():
            return {}

        raw = yaml.safe_load(project_file.read_text(encoding="utf-8")) or {}
        logger.debug(f"Loaded project config from {project_file}")

        result: dict = {}
        for yaml_key, field_name in _YAML_TO_FIELD.items():
            if yaml_key in raw and field_name not in result:
                result[field_name] = raw[yaml_key]
        return result


class FormKitConfig(BaseSettings):
    """Default processing options loaded from the environment.

    All environment variables are prefixed with FORMKIT_ (e.g.
    FORMKIT_VALIDATION_STRATEGY=remove_extra_fields). List values such as
    FORMKIT_EXCLUDE_FIELDS are given as JSON arrays.

    Example:
        >>> config = FormKitConfig()
        >>> options = ProcessingOptions.from_config(config, additional_data={"source": "web"})
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FORMKIT_",
        extra="ignore",
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            _ProjectYamlSource(settings_cls),
            file_secret_settings,
        )

    validation_strategy: ValidationStrategy = Field(
        default="strict",
        description="How undeclared fields and missing fields are treated",
    )

    schema_modification: SchemaModification = Field(
        default="default",
        description="Structural change applied to the base schema before the strategy",
    )

    output_format: OutputFormat = Field(
        default="object",
        description="Return validated data as a dict ('object') or a form container ('form_data')",
    )

    use_dynamic_validation: bool = Field(
        default=True,
        description="Build a dynamic schema per call; False validates against the base schema as-is",
    )

    exclude_fields: list[str] = Field(
        default_factory=list,
        description="Fields always dropped during extraction (e.g. csrf_token)",
    )

    @field_validator(
        "validation_strategy", "schema_modification", "output_format", mode="before"
    )
    @classmethod
    def normalize_names(cls, v: Any) -> Any:
        """Accept camelCase spellings such as 'allowExtraFields' or 'partial-strict'."""
        return normalize_option(v)
