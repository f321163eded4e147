# creative_studio/schemas/common.py
"""
Shared schema plumbing: camelCase wire format and the response envelope
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Dict


class CamelModel(BaseModel):
    """Accepts camelCase or snake_case on input, emits camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


def envelope(**data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}
