from __future__ import annotations

import json
from typing import Any

from ..exceptions import SerializationError


class JsonSerializer:
    """Compact UTF-8 JSON, the wire format of every employee event."""

    separators = (",", ":")

    def dumps(self, obj: Any) -> bytes:
        try:
            text = json.dumps(obj, separators=self.separators, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"cannot encode {type(obj).__name__}: {e}") from e
        return text.encode("utf-8")

    def loads(self, data: bytes) -> Any:
        try:
            return json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            raise SerializationError(f"invalid JSON payload: {e}") from e
