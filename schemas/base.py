"""Base schema: snake_case fields, camelCase aliases, either accepted on input."""
from pydantic import BaseModel, ConfigDict

from utils.case import to_camel_key


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel_key,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )
