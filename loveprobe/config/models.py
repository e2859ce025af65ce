from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.project_models import CONFIG_ENTRY, ENTRY_POINT, PACKAGE_EXTENSION, ProjectLayout
from ..exceptions import ValidationError


class _BaseConfigModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class _StrictConfigModel(BaseModel):
    # Mirrors additionalProperties: false in config-schema.json
    model_config = ConfigDict(extra="forbid")


class ProjectLayoutConfig(_StrictConfigModel):
    package_extension: str = Field(default=PACKAGE_EXTENSION, min_length=1)
    entry_point: str = Field(default=ENTRY_POINT, min_length=1)
    config_entry: str = Field(default=CONFIG_ENTRY, min_length=1)

    def to_layout(self) -> ProjectLayout:
        return ProjectLayout(
            package_extension=self.package_extension,
            entry_point=self.entry_point,
            config_entry=self.config_entry,
        )


class LoggingConfig(_StrictConfigModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    json_output: bool = Field(default=False, alias="json")
    file_logging: bool = False
    log_dir: Optional[str] = None


class ConfigModel(_BaseConfigModel):
    metadata: Dict[str, Any] = Field(default_factory=dict, alias="_metadata")
    project: ProjectLayoutConfig = Field(default_factory=ProjectLayoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def validate_config(payload: Dict[str, Any]) -> ConfigModel:
    try:
        return ConfigModel.model_validate(payload or {})
    except PydanticValidationError as exc:
        errors = exc.errors()
        field_name = ".".join(str(part) for part in errors[0]["loc"]) if errors else None
        raise ValidationError(
            f"Invalid configuration: {errors[0]['msg'] if errors else exc}",
            field_name=field_name,
        ) from exc
