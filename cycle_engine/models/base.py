"""
Base model shared by all engine models.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """
    Pydantic model that reads and writes camelCase field names.

    Records arrive from the store with camelCase keys (``startDate``);
    Python code uses the snake_case attribute names. Both are accepted
    on input, and ``model_dump(by_alias=True)`` restores the camelCase form.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
