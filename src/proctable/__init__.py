"""proctable — an in-memory model of an operating-system process table.

Processes are created, arranged in a parent/child tree, and moved
between a ready queue and an I/O queue.  Nothing actually runs: the
point is to watch the bookkeeping stay consistent.

Re-exports the core so callers can write::

    from proctable import ProcessRegistry
"""

from proctable.logging import LogEntry, Logger, LogLevel
from proctable.process import Process, ProcessState
from proctable.registry import (
    NO_PARENT,
    OperationResult,
    ProcessRegistry,
    QueueEntry,
    RegistrySnapshot,
    TreeRow,
)

__all__ = [
    "NO_PARENT",
    "LogEntry",
    "LogLevel",
    "Logger",
    "OperationResult",
    "Process",
    "ProcessRegistry",
    "ProcessState",
    "QueueEntry",
    "RegistrySnapshot",
    "TreeRow",
]
