from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Determine the extra-mode from environment vars.

    NOTEMARK_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> allow
    """
    raw = (os.getenv("NOTEMARK_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "allow"

    return default


_EXTRA = _env_extra_mode()


class NoteModel(BaseModel):
    """
    Project-wide base model for records handed over by the note store.

    Unknown fields are ignored by default; switch at runtime by setting an env
    var before import:
      export NOTEMARK_EXTRA=forbid   # or allow/ignore
    """

    model_config = ConfigDict(
        extra=_EXTRA,  # 'forbid' | 'allow' | 'ignore'
        populate_by_name=True,
    )


__all__ = ["NoteModel", "_env_extra_mode"]
