"""Feed data models.

Field names on the wire are capitalized (``Title``, ``Link`` ...) and are
matched case-insensitively when decoding, unknown keys are ignored and
missing strings default to ``""``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _match_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        fields = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            fields[name.lower()] = fields[alias.lower()] = (alias, field)
        matched = {}
        for key, value in data.items():
            if not isinstance(key, str) or key.lower() not in fields:
                continue
            alias, field = fields[key.lower()]
            # JSON null leaves a string field at its default.
            if value is None and field.default == "":
                continue
            matched[alias] = value
        return matched


class FeedMetaData(_WireModel):
    title: str = Field("", alias="Title")
    description: str = Field("", alias="Description")
    link: str = Field("", alias="Link")


class Item(_WireModel):
    title: str = Field("", alias="Title")
    link: str = Field("", alias="Link")
    # base64 text, decoded only for rendering
    description: str = Field("", alias="Description")
    date: str | None = Field(None, alias="Date")


class Feed(_WireModel):
    meta_data: FeedMetaData = Field(default_factory=FeedMetaData, alias="MetaData")
    items: list[Item] = Field(default_factory=list, alias="Items")
