"""Message bodies that may carry file attachments."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

# JSON body of POST /channels/{id}/messages, passed through as-is.
MessageCreateRequest = dict[str, Any]


@dataclass(frozen=True)
class MultipartRequest:
    """A message body plus zero or more ``(filename, content)`` attachments.

    A request without files is sent as a plain JSON body, so wrapping a
    ``MessageCreateRequest`` here never changes what goes over the wire.
    """

    request: MessageCreateRequest
    files: tuple[tuple[str, bytes], ...] = field(default_factory=tuple)

    @property
    def has_files(self) -> bool:
        return bool(self.files)

    def add_file(self, filename: str, content: bytes) -> MultipartRequest:
        """Return a copy of this request with one more attachment."""
        return replace(self, files=(*self.files, (filename, content)))
