from typing import Any
from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Task(BaseModel):
    # Absent fields decode to their zero value, unknown fields are ignored.
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    description: str = ""
    note: str = ""
    applications: list[str] = []

    @model_validator(mode="before")
    @classmethod
    def decode_like_json_unmarshal(cls, data: Any):
        # A JSON null body is a zero Task; field names match case-insensitively.
        if data is None:
            return {}
        if isinstance(data, dict):
            return {
                key.lower() if isinstance(key, str) else key: value
                for key, value in data.items()
            }
        return data

    @field_validator("applications", mode="before")
    def null_applications_as_empty(cls, v: Any):
        if v is None:
            return []
        return v
