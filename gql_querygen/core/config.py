"""Generation options."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DEPTH_LIMIT = 100


class GenerationConfig(BaseModel):
    """Options controlling how far and how wide selections are expanded.

    Examples:
        config = GenerationConfig(depth_limit=5)
        config = GenerationConfig(exclude_nested_args=True)
    """

    model_config = ConfigDict(frozen=True)

    depth_limit: int = Field(default=DEFAULT_DEPTH_LIMIT, gt=0)
    # Only the root field's own arguments become variables
    exclude_nested_args: bool = False
    include_deprecated_fields: bool = False
