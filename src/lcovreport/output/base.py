"""Base types and interface for report writers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    import datetime
    from typing import TextIO

ModelT = TypeVar("ModelT")
ModelT_contra = TypeVar("ModelT_contra", contravariant=True)


class Formatter(Protocol[ModelT_contra]):
    def __call__(self, report: ModelT_contra, generated: datetime.datetime) -> str: ...


class ReportWriter(Protocol[ModelT_contra]):
    def write(self, report: ModelT_contra, generated: datetime.datetime) -> None: ...


@dataclass(slots=True)
class SinkWriter(Generic[ModelT]):
    """Writer bound to one open text sink.

    The sink is owned by whoever opened it; :meth:`write` neither flushes nor
    closes it.
    """

    formatter: Formatter[ModelT]
    sink: TextIO

    def write(self, report: ModelT, generated: datetime.datetime) -> None:
        self.sink.write(self.formatter(report, generated))
