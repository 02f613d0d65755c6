from typing import Any

from pydantic.main import BaseModel


class BaseModelWithMethods(BaseModel):
    """Base model with json/dict helpers shared by the catalog and state models."""

    def to_json(self, **kwargs: Any) -> str:
        return self.model_dump_json(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
