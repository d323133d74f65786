from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import IO, Union


@dataclass(frozen=True)
class FilePart:
    """Binary form part: a file name, its content and an optional media type."""

    filename: str
    content: bytes | IO[bytes]
    content_type: str | None = None


FormValue = Union[str, FilePart]


@dataclass
class FormData:
    """Ordered multipart body. Names may repeat."""

    parts: list[tuple[str, FormValue]] = field(default_factory=list)

    def append(self, name: str, value: FormValue) -> None:
        self.parts.append((name, value))

    def __len__(self) -> int:
        return len(self.parts)

    def empty_body(self) -> tuple[str, bytes]:
        """Content type and bytes of a multipart body with no parts."""

        boundary = os.urandom(16).hex()
        return f"multipart/form-data; boundary={boundary}", f"--{boundary}--\r\n".encode("ascii")

    def to_httpx_files(self) -> list[tuple[str, tuple]]:
        # Text fields go through ``files`` with no filename so httpx always
        # encodes multipart/form-data, even when there is no file part.
        files: list[tuple[str, tuple]] = []
        for name, value in self.parts:
            if isinstance(value, FilePart):
                if value.content_type:
                    files.append((name, (value.filename, value.content, value.content_type)))
                else:
                    files.append((name, (value.filename, value.content)))
            else:
                files.append((name, (None, value.encode("utf-8"))))
        return files


__all__ = ["FilePart", "FormData", "FormValue"]
