"""Jellyfin item records and the dashboard card built from them."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class JellyfinItem(BaseModel):
    """One entry of the /Users/{id}/Items/Latest response.

    Jellyfin omits or nulls fields freely; those fall back to their zero value.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field("", alias="Id")
    name: str = Field("", alias="Name")
    type: str = Field("", alias="Type")
    series_id: str = Field("", alias="SeriesId")
    image_tags: dict[str, str] = Field(default_factory=dict, alias="ImageTags")
    community_rating: float = Field(0.0, alias="CommunityRating")
    official_rating: str = Field("", alias="OfficialRating")
    premiere_date: str = Field("", alias="PremiereDate")

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None:
            return value
        return cls.model_fields[info.field_name].get_default(call_default_factory=True)


# Dropped from the JSON body when falsy: a rating of 0 means "unrated".
OPTIONAL_CARD_FIELDS = ("rating", "year", "contentRating")


class Card(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    subtitle: str
    image: str
    href: str
    rating: float = 0.0
    year: str = ""
    content_rating: str = Field("", alias="contentRating")

    def to_json(self) -> dict:
        data = self.model_dump(by_alias=True)
        for key in OPTIONAL_CARD_FIELDS:
            if not data[key]:
                del data[key]
        return data
