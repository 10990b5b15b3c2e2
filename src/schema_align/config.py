import os

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_INDENT_LEVEL = 2
DEFAULT_BLOCK_TYPES = ("model_block", "view_block", "type_block")


class FormatterSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    indent_level: int = Field(default=DEFAULT_INDENT_LEVEL, ge=0)
    block_types: tuple[str, ...] = DEFAULT_BLOCK_TYPES


def load_settings(indent_level: int | None = None) -> FormatterSettings:
    """Build settings from ``SCHEMA_ALIGN_*`` environment variables.

    An explicit ``indent_level`` wins over the environment.
    """
    values: dict[str, object] = {}
    env_indent = os.getenv("SCHEMA_ALIGN_INDENT_LEVEL")
    if env_indent:
        values["indent_level"] = env_indent
    env_block_types = os.getenv("SCHEMA_ALIGN_BLOCK_TYPES")
    if env_block_types:
        values["block_types"] = tuple(t.strip() for t in env_block_types.split(",") if t.strip())
    if indent_level is not None:
        values["indent_level"] = indent_level
    return FormatterSettings.model_validate(values)
