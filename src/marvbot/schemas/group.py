"""Pydantic schemas for the GroupMe group endpoint.

Group mirrors the envelope returned by GET /groups/:id. GroupSnapshot is the
flattened view the poll loop compares between polls.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _GroupMeModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Attachment(_GroupMeModel):
    type: str = ""
    url: Optional[str] = None
    lat: Optional[str] = None
    lng: Optional[str] = None
    name: Optional[str] = None
    token: Optional[str] = None
    placeholder: Optional[str] = None
    charmap: List[List[int]] = []


class Preview(_GroupMeModel):
    nickname: str = ""
    text: str = ""
    image_url: Optional[str] = None
    attachments: List[Attachment] = []

    # Image-only messages come back with "text": null
    @field_validator("nickname", "text", mode="before")
    @classmethod
    def _null_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class MessagesSummary(_GroupMeModel):
    count: int = 0
    last_message_id: str = ""
    last_message_created_at: Optional[int] = None
    preview: Preview = Field(default_factory=Preview)

    @field_validator("last_message_id", mode="before")
    @classmethod
    def _id_as_string(cls, v: Any) -> Any:
        if v is None:
            return ""
        return str(v)


class Member(_GroupMeModel):
    user_id: str = ""
    nickname: str = ""


class GroupResponse(_GroupMeModel):
    id: str = ""
    group_id: str = ""
    name: str = ""
    phone_number: Optional[str] = None
    pinned: bool = False
    type: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    creator_user_id: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    muted_until: Optional[int] = None
    office_mode: bool = False
    messages: MessagesSummary = Field(default_factory=MessagesSummary)
    members: List[Member] = []


class Meta(_GroupMeModel):
    code: int = 0


class Group(_GroupMeModel):
    meta: Meta = Field(default_factory=Meta)
    response: GroupResponse


class GroupSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    group_id: str
    last_message_id: str = ""
    text: str = ""
    sender: str = ""
    message_count: int = 0

    @classmethod
    def from_group(cls, group: Group) -> "GroupSnapshot":
        resp = group.response
        return cls(
            group_id=resp.group_id or resp.id,
            last_message_id=resp.messages.last_message_id,
            text=resp.messages.preview.text,
            sender=resp.messages.preview.nickname,
            message_count=resp.messages.count,
        )
