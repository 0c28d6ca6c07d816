"""The process registry — sole owner of every process in the table.

The registry keeps three views of the same set of processes consistent:

- **The tree** — parent/child links, entered through a single root.
- **The ready queue** — FIFO of PIDs that could run.
- **The I/O queue** — FIFO of PIDs blocked on I/O.

Every live process sits in exactly one of the two queues; a terminated
process sits in neither and is gone from the tree.  Each operation
looks up everything it needs *before* changing anything, so a failed
operation leaves the table exactly as it found it.

Failures are not exceptions.  Asking for an unknown PID, or asking to
block a process that is already blocked, is an ordinary outcome in a
teaching tool, so every operation returns an ``OperationResult`` whose
message is the human-readable report.

Design choices:
    - **Arena by PID.**  One ``dict[int, Process]`` owns the processes;
      queues and tree links hold PIDs.  Termination is a single ``del``
      plus a few list filters, with no dangling object references.
    - **Queues as deques of PIDs.**  Removing an interior entry is a
      filter that keeps the relative order of everyone else.
    - **Display never drains a queue.**  ``snapshot()`` copies first.
"""

from collections import deque
from dataclasses import dataclass
from itertools import count

from proctable.logging import Logger, LogLevel
from proctable.process import Process, ProcessState

NO_PARENT = -1

_LOG_SOURCE = "registry"
_INDENT = "  "
_RULE = "-" * 20


@dataclass(frozen=True)
class OperationResult:
    """The outcome of one registry operation.

    Attributes:
        ok: True if the operation changed the table as requested.
        message: Human-readable report of what happened.
        pid: The PID the operation concerned, when there is one.

    """

    ok: bool
    message: str
    pid: int | None = None

    def __str__(self) -> str:
        """Return the report message."""
        return self.message


@dataclass(frozen=True)
class QueueEntry:
    """One process as listed in a queue."""

    pid: int
    name: str

    def __str__(self) -> str:
        """Format as ``PID: <pid>, Name: <name>``."""
        return f"PID: {self.pid}, Name: {self.name}"


@dataclass(frozen=True)
class TreeRow:
    """One process as visited by the pre-order tree walk."""

    depth: int
    pid: int
    name: str

    def __str__(self) -> str:
        """Format as an indented ``PID: <pid>, Name: <name>`` line."""
        return f"{_INDENT * self.depth}PID: {self.pid}, Name: {self.name}"


@dataclass(frozen=True)
class RegistrySnapshot:
    """A read-only copy of the registry's queues and tree."""

    ready: tuple[QueueEntry, ...] = ()
    io: tuple[QueueEntry, ...] = ()
    root_pid: int | None = None
    tree: tuple[TreeRow, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of the snapshot."""
        return {
            "ready": [{"pid": e.pid, "name": e.name} for e in self.ready],
            "io": [{"pid": e.pid, "name": e.name} for e in self.io],
            "root": self.root_pid,
            "tree": [{"depth": r.depth, "pid": r.pid, "name": r.name} for r in self.tree],
        }

    def render(self) -> str:
        """Format the snapshot as the multi-section state report.

        Each section header is preceded by a blank line.
        """
        lines = ["", "--- Ready Queue ---"]
        lines.extend(str(entry) for entry in self.ready)
        lines.extend(["", "--- I/O Queue ---"])
        lines.extend(str(entry) for entry in self.io)
        lines.extend(["", "--- Process Tree ---"])
        if self.root_pid is None:
            lines.append("(No processes created yet)")
        else:
            lines.extend(str(row) for row in self.tree)
        lines.append(_RULE)
        return "\n".join(lines)


class ProcessRegistry:
    """Owns every process and keeps the tree and both queues consistent.

    A registry is built once, mutated through its five operations, and
    discarded when the program ends.  It is not thread-safe; callers
    issue operations one at a time.
    """

    def __init__(self, *, logger: Logger | None = None) -> None:
        """Create an empty registry.

        Args:
            logger: Where to record events.  A fresh one is created if
                omitted.

        """
        self._logger = logger if logger is not None else Logger()
        self._pid_counter = count(start=1)
        self._total_created = 0
        self._processes: dict[int, Process] = {}
        self._root_pid: int | None = None
        self._ready: deque[int] = deque()
        self._io: deque[int] = deque()

    # -- Read-only views -------------------------------------------------

    @property
    def logger(self) -> Logger:
        """Return the registry's event log."""
        return self._logger

    @property
    def root_pid(self) -> int | None:
        """Return the PID of the designated root, or None."""
        return self._root_pid

    @property
    def ready_queue(self) -> list[int]:
        """Return ready PIDs, head first (a copy)."""
        return list(self._ready)

    @property
    def io_queue(self) -> list[int]:
        """Return I/O-waiting PIDs, head first (a copy)."""
        return list(self._io)

    @property
    def processes(self) -> list[Process]:
        """Return live processes in PID order."""
        return [self._processes[pid] for pid in sorted(self._processes)]

    def __len__(self) -> int:
        """Return the number of live processes."""
        return len(self._processes)

    def __contains__(self, pid: object) -> bool:
        """Return True if *pid* names a live process."""
        return pid in self._processes

    def get(self, pid: int) -> Process | None:
        """Return the live process with *pid*, or None."""
        return self._processes.get(pid)

    def call_stack(self, pid: int) -> tuple[str, ...] | None:
        """Return the call stack of *pid* (bottom first), or None if unknown."""
        process = self._processes.get(pid)
        return process.call_stack if process is not None else None

    def state_of(self, pid: int) -> ProcessState | None:
        """Derive the lifecycle state of *pid* from queue membership.

        Returns:
            READY or IO_WAIT for a live process, TERMINATED for a PID
            that was issued and has since been removed, and None for a
            PID that was never issued.

        """
        if pid in self._ready:
            return ProcessState.READY
        if pid in self._io:
            return ProcessState.IO_WAIT
        if 1 <= pid <= self._total_created and pid not in self._processes:
            return ProcessState.TERMINATED
        return None

    # -- Operations ------------------------------------------------------

    def create_process(self, name: str, parent_pid: int | None = None) -> OperationResult:
        """Create a process and append it to the ready queue.

        An unknown parent PID is not an error: the new process is simply
        created without a parent.  It becomes the root only if no root
        currently exists.

        Args:
            name: Display name for the new process.
            parent_pid: PID of the intended parent; None or ``NO_PARENT``
                for none.

        Returns:
            A successful result carrying the new PID.

        """
        parent = None
        if parent_pid is not None and parent_pid != NO_PARENT:
            parent = self._processes.get(parent_pid)

        pid = next(self._pid_counter)
        self._total_created += 1
        process = Process(
            pid=pid,
            name=name,
            parent_pid=parent.pid if parent is not None else None,
        )

        if parent is not None:
            parent.add_child(pid)
        elif self._root_pid is None:
            self._root_pid = pid

        self._processes[pid] = process
        self._ready.append(pid)

        self._log(LogLevel.INFO, f"created pid={pid} name={name!r} parent={process.parent_pid}")
        return OperationResult(ok=True, message=f"Created process: PID={pid}", pid=pid)

    def call_function(self, pid: int, func_name: str) -> OperationResult:
        """Push *func_name* onto the call stack of *pid*."""
        process = self._processes.get(pid)
        if process is None:
            return self._not_found(pid)

        process.push_call(func_name)
        self._log(LogLevel.INFO, f"pid={pid} called {func_name!r}")
        return OperationResult(
            ok=True, message=f"Process {pid} called function: {func_name}", pid=pid
        )

    def request_io(self, pid: int) -> OperationResult:
        """Move *pid* from the ready queue to the tail of the I/O queue.

        Returns:
            Success, "not in ready queue" for a live process that is
            already waiting, or "not found" for an unknown PID.

        """
        if pid not in self._processes:
            return self._not_found(pid)
        if pid not in self._ready:
            self._log(LogLevel.WARNING, f"request_io: pid={pid} not in ready queue")
            return OperationResult(ok=False, message="Process not in ready queue.", pid=pid)

        self._ready = _without(self._ready, pid)
        self._io.append(pid)
        self._log(LogLevel.INFO, f"pid={pid} ready -> io_wait")
        return OperationResult(ok=True, message=f"Process {pid} moved to I/O queue.", pid=pid)

    def complete_io(self, pid: int) -> OperationResult:
        """Move *pid* from the I/O queue to the tail of the ready queue.

        An unknown PID and a PID that is not waiting on I/O get the same
        report.
        """
        if pid not in self._io:
            self._log(LogLevel.WARNING, f"complete_io: pid={pid} not in I/O queue")
            return OperationResult(ok=False, message="Process not found in I/O queue.", pid=pid)

        self._io = _without(self._io, pid)
        self._ready.append(pid)
        self._log(LogLevel.INFO, f"pid={pid} io_wait -> ready")
        return OperationResult(
            ok=True,
            message=f"Process {pid} completed I/O and returned to ready queue.",
            pid=pid,
        )

    def terminate_process(self, pid: int) -> OperationResult:
        """Remove *pid* from its queue, its parent, the root slot, and the table.

        Children of the terminated process are left as they are: their
        ``parent_pid`` still names the removed PID, they are not moved
        to a grandparent, and none of them becomes the root.
        """
        process = self._processes.get(pid)
        if process is None:
            return self._not_found(pid)

        self._ready = _without(self._ready, pid)
        self._io = _without(self._io, pid)

        if process.parent_pid is not None:
            parent = self._processes.get(process.parent_pid)
            if parent is not None:
                parent.remove_child(pid)

        if self._root_pid == pid:
            self._root_pid = None

        del self._processes[pid]

        orphans = len(process.children)
        suffix = f" ({orphans} orphaned)" if orphans else ""
        self._log(LogLevel.INFO, f"terminated pid={pid}{suffix}")
        return OperationResult(ok=True, message=f"Process {pid} terminated.", pid=pid)

    def snapshot(self) -> RegistrySnapshot:
        """Copy both queues and walk the tree without mutating anything."""
        return RegistrySnapshot(
            ready=tuple(self._entry(pid) for pid in list(self._ready)),
            io=tuple(self._entry(pid) for pid in list(self._io)),
            root_pid=self._root_pid,
            tree=tuple(self._walk_tree()),
        )

    def show_state(self) -> str:
        """Return the ready queue, I/O queue and process tree as text."""
        return self.snapshot().render()

    # -- Helpers ---------------------------------------------------------

    def _entry(self, pid: int) -> QueueEntry:
        return QueueEntry(pid=pid, name=self._processes[pid].name)

    def _walk_tree(self) -> list[TreeRow]:
        """Pre-order walk from the root, children in creation order."""
        if self._root_pid is None:
            return []
        rows: list[TreeRow] = []
        stack = [(0, self._root_pid)]
        while stack:
            depth, pid = stack.pop()
            process = self._processes[pid]
            rows.append(TreeRow(depth=depth, pid=pid, name=process.name))
            stack.extend((depth + 1, child) for child in reversed(process.children))
        return rows

    def _not_found(self, pid: int) -> OperationResult:
        self._log(LogLevel.WARNING, f"pid={pid} not found")
        return OperationResult(ok=False, message="Process not found.", pid=pid)

    def _log(self, level: LogLevel, message: str) -> None:
        self._logger.log(level, message, source=_LOG_SOURCE)


def _without(queue: deque[int], pid: int) -> deque[int]:
    """Return a copy of *queue* with every occurrence of *pid* removed."""
    return deque(p for p in queue if p != pid)
