from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseModelWithMethods(BaseModel):
    """Base model with json/dict helpers shared by every Kakao payload."""

    # Upstream payloads may grow new fields; keep them so saved files stay lossless.
    model_config = ConfigDict(extra="allow")

    def to_json(self, **kwargs: Any) -> str:
        return self.model_dump_json(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
