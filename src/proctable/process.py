"""Process — one entry in the simulated process table.

A process here is a passive record: an identifier, a display name, its
place in the parent/child hierarchy, and a log of the functions it has
"called".  It never runs anything.

Relationships are stored as **PIDs, not object references**.  The
registry owns every ``Process`` in a single ``pid → Process`` mapping;
parents, children and queue entries are all lookups into that mapping.
A terminated process simply disappears from the mapping, so nothing can
hold a stale object reference to it.

Queue membership is deliberately *not* stored on the process.  Whether
a process is ready or waiting on I/O is a fact about the registry's
queues, and the registry derives it on demand::

    CREATED → READY ⇄ IO_WAIT → TERMINATED
"""

from enum import StrEnum


class ProcessState(StrEnum):
    """Where a process currently sits in its lifecycle.

    - READY: in the ready queue (the state right after creation).
    - IO_WAIT: in the I/O queue, blocked until its I/O completes.
    - TERMINATED: removed from the table; absorbing.
    """

    READY = "ready"
    IO_WAIT = "io_wait"
    TERMINATED = "terminated"


class Process:
    """A simulated process record.

    Only the registry creates processes and assigns their PIDs.  The
    mutating helpers below do local bookkeeping and nothing else: they
    never touch another process or a queue.
    """

    def __init__(self, *, pid: int, name: str, parent_pid: int | None = None) -> None:
        """Create a process record.

        Args:
            pid: Identifier assigned by the registry.
            name: Human-readable label (need not be unique).
            parent_pid: PID of the parent process, or None for a root.

        """
        self._pid = pid
        self._name = name
        self._parent_pid = parent_pid
        self._children: list[int] = []
        self._call_stack: list[str] = []

    @property
    def pid(self) -> int:
        """Return the unique process identifier."""
        return self._pid

    @property
    def name(self) -> str:
        """Return the process name."""
        return self._name

    @property
    def parent_pid(self) -> int | None:
        """Return the parent's PID, or None for a parentless process.

        After the parent is terminated this still names the old PID,
        which no longer resolves in the registry.
        """
        return self._parent_pid

    @property
    def children(self) -> tuple[int, ...]:
        """Return child PIDs in the order they were created."""
        return tuple(self._children)

    @property
    def call_stack(self) -> tuple[str, ...]:
        """Return recorded function names, bottom of the stack first."""
        return tuple(self._call_stack)

    def add_child(self, pid: int) -> None:
        """Append *pid* to this process's children."""
        self._children.append(pid)

    def remove_child(self, pid: int) -> None:
        """Drop *pid* from this process's children, if present."""
        self._children = [c for c in self._children if c != pid]

    def push_call(self, func_name: str) -> None:
        """Record a call to *func_name* on top of the call stack."""
        self._call_stack.append(func_name)

    def __repr__(self) -> str:
        """Return a debug-friendly representation."""
        return f"Process(pid={self._pid}, name={self._name!r}, parent_pid={self._parent_pid})"
