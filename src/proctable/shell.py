"""The shell — command interpreter for the process table.

The shell turns a line of text into one registry operation and returns
the registry's report as a string.  It is the only place that parses
user input: the registry receives integers and names, never raw text.

Every command has a name and, for the six menu operations, a numeric
alias matching the interactive menu::

    1 create <name> [parent_pid]     4 done <pid>
    2 call <pid> <function>          5 kill <pid>
    3 io <pid>                       6 state
    0 exit

Design choices:
    - **Returns strings, not prints.**  The caller (the REPL or the web
      UI) decides how to display output, and tests can assert on it.
    - **Command dispatch via a dict.**  Adding a command means writing
      a method and adding one dict entry.
    - **Bad input is reported, never raised.**  A missing argument
      gives a ``Usage:`` line; a non-numeric PID gives ``Error:``.
"""

from collections.abc import Callable

from proctable.logging import LogLevel
from proctable.registry import NO_PARENT, ProcessRegistry

# Type alias for a command handler: takes a list of args, returns output.
_Handler = Callable[[list[str]], str]

# Menu choice → command name.
MENU_ALIASES: dict[str, str] = {
    "1": "create",
    "2": "call",
    "3": "io",
    "4": "done",
    "5": "kill",
    "6": "state",
    "0": "exit",
}


class Shell:
    """Command interpreter attached to one process registry."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(self, *, registry: ProcessRegistry) -> None:
        """Create a shell that drives *registry*.

        Args:
            registry: The process registry every command operates on.

        """
        self._registry = registry
        self._halted = False

        # Command dispatch table — maps command names to handler methods.
        self._commands: dict[str, _Handler] = {
            "help": self._cmd_help,
            "create": self._cmd_create,
            "call": self._cmd_call,
            "io": self._cmd_io,
            "done": self._cmd_done,
            "kill": self._cmd_kill,
            "state": self._cmd_state,
            "ps": self._cmd_ps,
            "stack": self._cmd_stack,
            "log": self._cmd_log,
            "exit": self._cmd_exit,
        }

    @property
    def registry(self) -> ProcessRegistry:
        """Return the registry this shell drives."""
        return self._registry

    @property
    def halted(self) -> bool:
        """Return True once ``exit`` has been executed."""
        return self._halted

    @property
    def command_names(self) -> list[str]:
        """Return the sorted list of command names."""
        return sorted(self._commands)

    def execute(self, command: str) -> str:
        """Parse and execute one command line.

        Args:
            command: The raw command string (e.g. "create init -1").

        Returns:
            The command output, a usage hint, or an error message.

        """
        parts = command.split()
        if not parts:
            return ""

        name, args = parts[0], parts[1:]
        if name.isdigit():
            if name not in MENU_ALIASES:
                return "Invalid choice."
            name = MENU_ALIASES[name]

        handler = self._commands.get(name)
        if handler is None:
            return f"Unknown command: {name}"
        return handler(args)

    # -- Command handlers ------------------------------------------------

    def _cmd_help(self, _args: list[str]) -> str:
        """List available commands."""
        return "Available commands: " + ", ".join(self.command_names)

    def _cmd_create(self, args: list[str]) -> str:
        """Create a process, optionally under a parent."""
        if not args:
            return "Usage: create <name> [parent_pid]"
        parent_pid = NO_PARENT
        if len(args) > 1:
            parsed = _parse_pid(args[1])
            if parsed is None:
                return f"Error: invalid PID '{args[1]}'"
            parent_pid = parsed
        return str(self._registry.create_process(args[0], parent_pid))

    def _cmd_call(self, args: list[str]) -> str:
        """Record a function call against a process."""
        if len(args) < 2:  # noqa: PLR2004
            return "Usage: call <pid> <function>"
        pid = _parse_pid(args[0])
        if pid is None:
            return f"Error: invalid PID '{args[0]}'"
        return str(self._registry.call_function(pid, args[1]))

    def _cmd_io(self, args: list[str]) -> str:
        """Move a ready process to the I/O queue."""
        if not args:
            return "Usage: io <pid>"
        pid = _parse_pid(args[0])
        if pid is None:
            return f"Error: invalid PID '{args[0]}'"
        return str(self._registry.request_io(pid))

    def _cmd_done(self, args: list[str]) -> str:
        """Return an I/O-waiting process to the ready queue."""
        if not args:
            return "Usage: done <pid>"
        pid = _parse_pid(args[0])
        if pid is None:
            return f"Error: invalid PID '{args[0]}'"
        return str(self._registry.complete_io(pid))

    def _cmd_kill(self, args: list[str]) -> str:
        """Terminate a process by PID."""
        if not args:
            return "Usage: kill <pid>"
        pid = _parse_pid(args[0])
        if pid is None:
            return f"Error: invalid PID '{args[0]}'"
        return str(self._registry.terminate_process(pid))

    def _cmd_state(self, _args: list[str]) -> str:
        """Show both queues and the process tree."""
        return self._registry.show_state()

    def _cmd_ps(self, _args: list[str]) -> str:
        """List live processes."""
        lines = ["PID    PPID   STATE      NAME"]
        for p in self._registry.processes:
            ppid = "-" if p.parent_pid is None else str(p.parent_pid)
            state = self._registry.state_of(p.pid)
            lines.append(f"{p.pid:<6} {ppid:<6} {state!s:<10} {p.name}")
        return "\n".join(lines)

    def _cmd_stack(self, args: list[str]) -> str:
        """Show the recorded call stack of a process, top first."""
        if not args:
            return "Usage: stack <pid>"
        pid = _parse_pid(args[0])
        if pid is None:
            return f"Error: invalid PID '{args[0]}'"
        stack = self._registry.call_stack(pid)
        if stack is None:
            return "Process not found."
        if not stack:
            return f"Process {pid} has an empty call stack."
        return "\n".join(reversed(stack))

    def _cmd_log(self, args: list[str]) -> str:
        """Show the event log, optionally from a minimum level, or clear it."""
        logger = self._registry.logger
        if not args:
            entries = logger.entries
        elif args[0] == "clear":
            logger.clear()
            return "Log cleared."
        else:
            try:
                min_level = LogLevel[args[0].upper()]
            except KeyError:
                levels = "|".join(level.name.lower() for level in LogLevel)
                return f"Usage: log [{levels}|clear]"
            entries = logger.filter(min_level=min_level)
        if not entries:
            return "No log entries."
        return "\n".join(str(e) for e in entries)

    def _cmd_exit(self, _args: list[str]) -> str:
        """Stop accepting commands."""
        self._halted = True
        return self.EXIT_SENTINEL


def _parse_pid(text: str) -> int | None:
    """Return *text* as an int, or None if it is not one."""
    try:
        return int(text)
    except ValueError:
        return None
