"""Tests for the process record.

A process is a passive record: PID, name, parent link, children and a
call-stack log.  It keeps its own bookkeeping and nothing else.
"""

from proctable.process import Process, ProcessState

CHILD_PID = 2
OTHER_CHILD_PID = 3


class TestProcessCreation:
    """Verify that a newly created process has correct defaults."""

    def test_stores_pid_and_name(self) -> None:
        """PID and name should be readable after creation."""
        process = Process(pid=1, name="init")
        assert process.pid == 1
        assert process.name == "init"

    def test_has_no_parent_by_default(self) -> None:
        """A root process has no parent PID."""
        assert Process(pid=1, name="init").parent_pid is None

    def test_accepts_parent_pid(self) -> None:
        """A child process stores its parent's PID."""
        child = Process(pid=CHILD_PID, name="sh", parent_pid=1)
        assert child.parent_pid == 1

    def test_starts_with_no_children_and_empty_stack(self) -> None:
        """A new process has no children and no recorded calls."""
        process = Process(pid=1, name="init")
        assert process.children == ()
        assert process.call_stack == ()

    def test_repr(self) -> None:
        """The repr should name the PID and the process."""
        assert "pid=1" in repr(Process(pid=1, name="init"))


class TestChildren:
    """Verify child bookkeeping."""

    def test_children_keep_insertion_order(self) -> None:
        """Children should be listed in the order they were added."""
        process = Process(pid=1, name="init")
        process.add_child(OTHER_CHILD_PID)
        process.add_child(CHILD_PID)
        assert process.children == (OTHER_CHILD_PID, CHILD_PID)

    def test_remove_child(self) -> None:
        """Removing a child should keep the others in order."""
        process = Process(pid=1, name="init")
        process.add_child(CHILD_PID)
        process.add_child(OTHER_CHILD_PID)
        process.remove_child(CHILD_PID)
        assert process.children == (OTHER_CHILD_PID,)

    def test_remove_unknown_child_is_noop(self) -> None:
        """Removing a PID that is not a child changes nothing."""
        process = Process(pid=1, name="init")
        process.add_child(CHILD_PID)
        process.remove_child(99)
        assert process.children == (CHILD_PID,)


class TestCallStack:
    """Verify the append-only call stack."""

    def test_push_call_records_names_in_order(self) -> None:
        """Calls should stack bottom-first."""
        process = Process(pid=1, name="init")
        process.push_call("main")
        process.push_call("read")
        assert process.call_stack == ("main", "read")

    def test_call_stack_is_read_only_view(self) -> None:
        """The exposed stack is a tuple snapshot."""
        process = Process(pid=1, name="init")
        process.push_call("main")
        snapshot = process.call_stack
        process.push_call("write")
        assert snapshot == ("main",)


class TestProcessState:
    """Verify the lifecycle enum."""

    def test_states_are_strings(self) -> None:
        """States should format as plain strings."""
        assert f"{ProcessState.IO_WAIT}" == "io_wait"
        assert ProcessState.READY == "ready"
