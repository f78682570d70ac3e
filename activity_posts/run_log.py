from __future__ import annotations

import json
import traceback
import uuid
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Any, TextIO


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _truncate(text: str, *, limit: int) -> str:
    s = str(text or "")
    if limit <= 0:
        return ""
    if len(s) <= limit:
        return s
    return s[: max(0, limit - 1)] + "…"


class RunLogger:
    """
    JSONL event log for a classify run.

    Every line is one JSON object with ts, level, event and session_id, plus the
    command name once bound and any event data.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        overwrite: bool = True,
        command: str | None = None,
        session_id: str | None = None,
    ) -> None:
        self._path = Path(path)
        self._overwrite = bool(overwrite)
        self._command = (command or "").strip() or None
        self._session_id = (session_id or "").strip() or uuid.uuid4().hex
        self._fp: TextIO | None = None
        self._lock = Lock()

    @classmethod
    def open(
        cls,
        path: str | Path,
        *,
        overwrite: bool = True,
        command: str | None = None,
    ) -> "RunLogger":
        logger = cls(path, overwrite=overwrite, command=command)
        logger._ensure_open()
        return logger

    def close(self) -> None:
        with self._lock:
            if self._fp is not None:
                try:
                    self._fp.flush()
                finally:
                    self._fp.close()
                self._fp = None

    def __enter__(self) -> "RunLogger":
        self._ensure_open()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    def info(self, event: str, **data: Any) -> None:
        self.log("INFO", event, **data)

    def warning(self, event: str, **data: Any) -> None:
        self.log("WARN", event, **data)

    def error(self, event: str, **data: Any) -> None:
        self.log("ERROR", event, **data)

    def exception(self, event: str, *, exc: BaseException, **data: Any) -> None:
        err = {
            "type": type(exc).__name__,
            "message": _truncate(str(exc), limit=2000),
            "traceback": _truncate(
                "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
                limit=12000,
            ),
        }
        self.log("ERROR", event, error=err, **data)

    def log(self, level: str, event: str, **data: Any) -> None:
        record: dict[str, Any] = {
            "ts": _utc_now_iso(),
            "level": (level or "").strip().upper() or "INFO",
            "event": (event or "").strip() or "event",
            "session_id": self._session_id,
        }
        if self._command:
            record["command"] = self._command
        if data:
            record["data"] = data

        self._write(record)

    def _ensure_open(self) -> None:
        if self._fp is not None:
            return

        with self._lock:
            if self._fp is not None:
                return
            self._path.parent.mkdir(parents=True, exist_ok=True)
            mode = "w" if self._overwrite else "a"
            self._fp = self._path.open(mode, encoding="utf-8", newline="\n")
            # Reopening after close() must not wipe earlier events.
            self._overwrite = False

    def _write(self, record: dict[str, Any]) -> None:
        self._ensure_open()

        payload = json.dumps(
            record,
            ensure_ascii=False,
            sort_keys=True,
            separators=(",", ":"),
            default=str,
        )

        with self._lock:
            if self._fp is None:
                return
            self._fp.write(payload + "\n")
            self._fp.flush()
