"""Thread messages and their files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

MESSAGES_SUFFIX = "messages"


@dataclass
class ImageFile:
    """An image attached by file id."""

    file_id: str = ""


@dataclass
class ImageURL:
    """An image attached by URL."""

    url: str = ""
    detail: str = ""


@dataclass
class MessageText:
    """Text content of a message."""

    value: str = ""
    annotations: list[Any] = field(default_factory=list)


@dataclass
class MessageContent:
    """One piece of a message's content."""

    type: str = ""
    text: MessageText | None = None
    image_file: ImageFile | None = None
    image_url: ImageURL | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> MessageContent:
        data = data or {}
        text = data.get("text")
        image_file = data.get("image_file")
        image_url = data.get("image_url")
        return cls(
            type=data.get("type") or "",
            text=(
                MessageText(value=text.get("value") or "", annotations=list(text.get("annotations") or []))
                if text is not None
                else None
            ),
            image_file=ImageFile(file_id=image_file.get("file_id") or "") if image_file is not None else None,
            image_url=(
                ImageURL(url=image_url.get("url") or "", detail=image_url.get("detail") or "")
                if image_url is not None
                else None
            ),
        )


@dataclass
class Message:
    """A message in a thread."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    thread_id: str = ""
    role: str = ""
    content: list[MessageContent] = field(default_factory=list)
    file_ids: list[str] = field(default_factory=list)
    assistant_id: str | None = None
    run_id: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Message:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=data.get("created_at") or 0,
            thread_id=data.get("thread_id") or "",
            role=data.get("role") or "",
            content=[MessageContent.from_dict(item) for item in data.get("content") or []],
            file_ids=list(data.get("file_ids") or []),
            assistant_id=data.get("assistant_id"),
            run_id=data.get("run_id"),
            metadata=dict(data.get("metadata") or {}),
        )


@dataclass
class MessagesList:
    """A page of messages in a thread."""

    messages: list[Message] = field(default_factory=list)
    object: str = ""
    first_id: str | None = None
    last_id: str | None = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> MessagesList:
        """Build from decoded JSON; the messages are under ``data``."""
        data = data or {}
        return cls(
            messages=[Message.from_dict(item) for item in data.get("data") or []],
            object=data.get("object") or "",
            first_id=data.get("first_id"),
            last_id=data.get("last_id"),
            has_more=bool(data.get("has_more")),
        )


@dataclass
class MessageRequest:
    """Parameters for creating a message."""

    role: str = ""
    content: str = ""
    file_ids: list[str] | None = None
    metadata: dict[str, Any] | None = None
    attachments: list[Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """The JSON body; empty optional fields are left out."""
        body: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.file_ids:
            body["file_ids"] = list(self.file_ids)
        if self.metadata:
            body["metadata"] = dict(self.metadata)
        if self.attachments:
            body["attachments"] = [
                item.to_dict() if callable(getattr(item, "to_dict", None)) else item
                for item in self.attachments
            ]
        return body


@dataclass
class MessageFile:
    """A file attached to a message."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    message_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> MessageFile:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=data.get("created_at") or 0,
            message_id=data.get("message_id") or "",
        )


@dataclass
class MessageFilesList:
    """The files attached to a message."""

    message_files: list[MessageFile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> MessageFilesList:
        """Build from decoded JSON; the files are under ``data``."""
        data = data or {}
        return cls(message_files=[MessageFile.from_dict(item) for item in data.get("data") or []])


@dataclass
class MessageDeletionStatus:
    """Deletion status of a message."""

    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> MessageDeletionStatus:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            deleted=bool(data.get("deleted")),
        )


def messages_path(
    thread_id: str,
    limit: int | None = None,
    order: str | None = None,
    after: str | None = None,
    before: str | None = None,
    run_id: str | None = None,
) -> str:
    """The URL path listing a thread's messages, with the paging query if any."""
    query: dict[str, str] = {}
    if limit is not None:
        query["limit"] = str(limit)
    if order is not None:
        query["order"] = order
    if after is not None:
        query["after"] = after
    if before is not None:
        query["before"] = before
    if run_id is not None:
        query["run_id"] = run_id
    path = f"/threads/{thread_id}/{MESSAGES_SUFFIX}"
    if query:
        path += "?" + urlencode(sorted(query.items()))
    return path


def modify_message_body(metadata: dict[str, str] | None) -> dict[str, Any]:
    """The JSON body of a message modification."""
    return {"metadata": dict(metadata) if metadata is not None else None}