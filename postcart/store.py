"""Small JSON-file backed store for counters, block lists and queued jobs."""

from __future__ import annotations

import json
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

STAT_NAMES = frozenset(
    {
        "inbound",
        "sent",
        "errors",
        "rejections",
        "retries",
        "bounces",
        "spamc",
        "deliveries",
        "blocked_senders",
        "blocked_recipients",
    }
)


class StoreError(Exception):
    """Raised when the store cannot read or write its files."""


@dataclass
class JobRecord:
    """A queued postcard job as persisted on disk."""

    id: str
    to_email: str = ""
    to_name: str = ""
    from_email: str = ""
    from_name: str = ""
    artwork: int = 0
    style: int = 0
    font: int = 0
    border: int = 0
    stamp_shape: int = 0
    textured: int = 0
    country: str = ""
    subject: str = ""
    message: str = ""
    attachment_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; empty optional fields are left out."""
        data: dict[str, Any] = {"id": self.id, "to_email": self.to_email}
        if self.to_name:
            data["to_name"] = self.to_name
        data["from_email"] = self.from_email
        if self.from_name:
            data["from_name"] = self.from_name
        data.update(
            artwork=self.artwork,
            style=self.style,
            font=self.font,
            border=self.border,
            stamp=self.stamp_shape,
            textured=self.textured,
            country=self.country,
            subject=self.subject,
            message=self.message,
        )
        if self.attachment_type:
            data["attachment_type"] = self.attachment_type
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JobRecord:
        """Build a record from a mapping produced by :meth:`to_dict`."""
        return cls(
            id=data.get("id", ""),
            to_email=data.get("to_email", ""),
            to_name=data.get("to_name", ""),
            from_email=data.get("from_email", ""),
            from_name=data.get("from_name", ""),
            artwork=int(data.get("artwork", 0)),
            style=int(data.get("style", 0)),
            font=int(data.get("font", 0)),
            border=int(data.get("border", 0)),
            stamp_shape=int(data.get("stamp", 0)),
            textured=int(data.get("textured", 0)),
            country=data.get("country", ""),
            subject=data.get("subject", ""),
            message=data.get("message", ""),
            attachment_type=data.get("attachment_type", ""),
        )


def _wrap_int8(value: int) -> int:
    # Sender counters are one signed byte wide on disk.
    return (value + 128) % 256 - 128


@dataclass
class _Table:
    path: Path
    data: dict[str, Any] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock)

    def load(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StoreError(f"error reading {self.path}: {exc}") from exc
        try:
            loaded = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StoreError(f"invalid JSON in {self.path}: {exc}") from exc
        if not isinstance(loaded, dict):
            raise StoreError(f"expected an object in {self.path}")
        return loaded

    def save(self, payload: dict[str, Any]) -> None:
        ordered = dict(sorted(payload.items()))
        try:
            self.path.write_text(json.dumps(ordered, separators=(",", ":")), encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"error writing {self.path}: {exc}") from exc


class Store:
    """Counters, block lists and the job queue, kept as JSON files in a directory."""

    def __init__(self, data_dir: str | os.PathLike[str] = "./data") -> None:
        self.data_dir = Path(data_dir)
        self._recipients = _Table(self.data_dir / "recip.json")
        self._senders = _Table(self.data_dir / "senders.json")
        self._blocked = _Table(self.data_dir / "blocked.json")
        self._stats = _Table(self.data_dir / "stats.json")
        self._jobs = _Table(self.data_dir / "queue.json")

    def __enter__(self) -> Store:
        self.load()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def load(self) -> None:
        """Create the data directory if needed and read every table."""
        try:
            (self.data_dir / "attachments").mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"cannot create {self.data_dir}: {exc}") from exc
        for table in (self._recipients, self._senders, self._blocked, self._stats):
            loaded = table.load()
            with table.lock:
                table.data = {key: int(value) for key, value in loaded.items()}
        jobs = self._jobs.load()
        with self._jobs.lock:
            self._jobs.data = {key: JobRecord.from_dict(value) for key, value in jobs.items()}

    def close(self) -> None:
        """Write every table back to disk."""
        for table in (self._recipients, self._senders, self._blocked, self._stats):
            with table.lock:
                table.save(table.data)
        self._save_jobs()

    def _save_jobs(self) -> None:
        with self._jobs.lock:
            self._jobs.save({key: job.to_dict() for key, job in self._jobs.data.items()})

    def block_recipient(self, email: str) -> None:
        with self._recipients.lock:
            self._recipients.data[email] = 1

    def is_recipient_blocked(self, email: str) -> bool:
        with self._recipients.lock:
            return self._recipients.data.get(email, 0) > 0

    def increment_sender(self, email: str) -> int:
        """Count one more card from ``email`` and return the new count."""
        with self._senders.lock:
            count = _wrap_int8(self._senders.data.get(email, 0) + 1)
            self._senders.data[email] = count
            return count

    def block_sender(self, email: str, rule_id: int) -> None:
        with self._blocked.lock:
            self._blocked.data[email] = rule_id

    def is_sender_blocked(self, email: str) -> bool:
        with self._blocked.lock:
            return self._blocked.data.get(email, 0) > 0

    def record_stat(self, name: str) -> None:
        """Increment one of the named counters in :data:`STAT_NAMES`."""
        if name not in STAT_NAMES:
            raise ValueError(f"unknown statistic {name!r}")
        with self._stats.lock:
            self._stats.data[name] = self._stats.data.get(name, 0) + 1

    def record_queue_size(self, size: int) -> None:
        with self._jobs.lock, self._stats.lock:
            self._stats.data["queue"] = size

    def increment_queue_size(self) -> None:
        with self._stats.lock:
            self._stats.data["queue"] = self._stats.data.get("queue", 0) + 1

    def decrement_queue_size(self) -> None:
        with self._stats.lock:
            self._stats.data["queue"] = self._stats.data.get("queue", 0) - 1

    def stats(self) -> dict[str, int]:
        """A snapshot of all counters."""
        with self._stats.lock:
            return dict(self._stats.data)

    def record_queued_job(self, job: JobRecord) -> None:
        """Remember ``job`` and write the queue file immediately."""
        with self._jobs.lock:
            self._jobs.data[job.id] = job
            self._save_jobs()

    def remove_job(self, job_id: str) -> None:
        with self._jobs.lock:
            self._jobs.data.pop(job_id, None)

    def uncompleted_jobs(self) -> dict[str, JobRecord]:
        with self._jobs.lock:
            return dict(self._jobs.data)

    def attachment_path(self, job_id: str) -> Path:
        """Where the attachment content of ``job_id`` is kept."""
        return self.data_dir / "attachments" / f"attachment-{job_id}"

    def remove_attachment(self, job_id: str) -> None:
        try:
            self.attachment_path(job_id).unlink()
        except OSError as exc:
            raise StoreError(f"cannot remove attachment for {job_id}: {exc}") from exc