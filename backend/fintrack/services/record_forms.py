"""
Single-field creation forms for sources, destinations and banks.

Flow: validate locally -> ask for confirmation -> await the submission ->
notify. Invalid input never reaches the submission function.
"""

import enum
import logging
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Iterable, List, Optional

from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel
from sqlalchemy.orm import Session

from fintrack.database import SessionLocal
from fintrack.services import record_service

logger = logging.getLogger(__name__)

Submit = Callable[[str], Awaitable[None]]


class RecordKind(str, enum.Enum):
    """What a form creates; the value is the user-facing label."""
    source = "sumber"
    destination = "tujuan"
    bank = "bank"

    @property
    def checks_duplicates(self) -> bool:
        return self in (RecordKind.source, RecordKind.destination)


class Severity(str, enum.Enum):
    success = "success"
    error = "error"


class Notification(BaseModel):
    title: str
    message: str
    severity: Severity


class ConfirmPrompt(BaseModel):
    title: str
    body: str
    confirm_label: str
    cancel_label: str
    on_confirm: Callable[[], Awaitable[None]]


class Notifier(ABC):
    """Where user-visible messages go."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        pass


class ConfirmGate(ABC):
    """
    Asks the user before a record is created.

    Implementations await `prompt.on_confirm()` when the user confirms and
    do nothing when they cancel.
    """

    @abstractmethod
    async def open(self, prompt: ConfirmPrompt) -> None:
        pass


class RecordForm:
    """State and behaviour of one "add new" input."""

    def __init__(
        self,
        kind: RecordKind,
        submit: Submit,
        notifier: Notifier,
        gate: ConfirmGate,
        existing_names: Optional[Iterable[str]] = None,
    ):
        self.kind = kind
        self.submit = submit
        self.notifier = notifier
        self.gate = gate
        self.existing_names: List[str] = list(existing_names or [])
        self.value = ""
        self.loading = False

    @property
    def label(self) -> str:
        return self.kind.value

    def _error(self, message: str) -> None:
        self.notifier.notify(Notification(title="Error", message=message, severity=Severity.error))

    async def handle_submit(self) -> None:
        name = self.value.strip()
        if not name:
            self._error(f"Nama {self.label} tidak boleh kosong")
            return

        if self.kind.checks_duplicates and record_service.name_taken(self.existing_names, name):
            self._error(f"{self.label.capitalize()} sudah ada")
            return

        async def on_confirm() -> None:
            await self._create(name)

        await self.gate.open(ConfirmPrompt(
            title="Konfirmasi Penambahan",
            body=f"Apakah Anda yakin ingin menambahkan {self.label} ini?",
            confirm_label="Tambah",
            cancel_label="Batal",
            on_confirm=on_confirm,
        ))

    async def _create(self, name: str) -> None:
        self.loading = True
        try:
            await self.submit(name)
        except Exception as e:
            logger.error(f"Failed to create {self.kind.name} {name!r}: {e}")
            self._error(f"Gagal menambahkan {self.label}")
        else:
            self.value = ""
            self.existing_names.append(name)
            self.notifier.notify(Notification(
                title="Sukses",
                message=f"{self.label.capitalize()} berhasil ditambahkan",
                severity=Severity.success,
            ))
        finally:
            self.loading = False


_CREATORS = {
    RecordKind.source: record_service.create_source,
    RecordKind.destination: record_service.create_destination,
    RecordKind.bank: record_service.create_bank,
}


def session_submitter(
    kind: RecordKind,
    email: str,
    session_factory: Callable[[], Session] = SessionLocal,
) -> Submit:
    """Submission function that writes through the record service in a worker thread."""
    create = _CREATORS[kind]

    def write(name: str) -> None:
        db = session_factory()
        try:
            create(db, email, name)
        finally:
            db.close()

    async def submit(name: str) -> None:
        await run_in_threadpool(write, name)

    return submit
