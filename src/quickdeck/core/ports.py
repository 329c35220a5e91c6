from typing import Protocol, Sequence

from .model import Record


class RecordSink(Protocol):
    """
    Receives extracted records one at a time, in document order.
    """

    def __call__(self, record: Record) -> None:
        pass


class ChangeReporter(Protocol):
    """
    Observes the line sequence before and after a deletion pass.
    """

    def report(self, before: Sequence[str], after: Sequence[str]) -> None:
        pass
