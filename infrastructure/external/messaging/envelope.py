from __future__ import annotations

from typing import Dict, Optional


H_VERSION = "x-version"
H_CORR_ID = "x-corr-id"

# payload schema version stamped on every outbound record
SCHEMA_VERSION = "v1"


def get_header(headers: Dict[str, bytes], key: str) -> Optional[str]:
    raw = headers.get(key)
    return None if raw is None else raw.decode("utf-8", errors="replace")


def set_header(headers: Dict[str, bytes], key: str, value: str) -> None:
    headers[key] = value.encode("utf-8")
