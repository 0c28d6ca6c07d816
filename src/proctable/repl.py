"""Interactive menu loop for the process table.

This is the console front end: it shows the numbered menu, asks for the
arguments the chosen operation needs, hands the assembled command to the
shell, and prints the result.

    1. **Menu** — print the choices.
    2. **Prompt** — read the choice, then one answer per argument.
    3. **Eval** — ``shell.execute()`` the assembled command.
    4. **Print** — show the registry's report and loop.

The helpers (``format_menu``, ``prompts_for``, ``compose_command``) are
pure and testable.  ``run()`` is the I/O entrypoint.
"""

from proctable.registry import ProcessRegistry
from proctable.shell import MENU_ALIASES, Shell

_MENU_TITLE = "--- OS Process Manager (Console) ---"

_MENU_LABELS: dict[str, str] = {
    "1": "Create Process",
    "2": "Call Function",
    "3": "Request I/O",
    "4": "Complete I/O",
    "5": "Terminate Process",
    "6": "Show State",
    "0": "Exit",
}

_PID_PROMPT = "Enter PID: "

# Argument prompts per menu choice, in the order the shell expects them.
_PROMPTS: dict[str, tuple[str, ...]] = {
    "1": ("Enter process name: ", "Enter parent PID (-1 if none): "),
    "2": (_PID_PROMPT, "Enter function name: "),
    "3": (_PID_PROMPT,),
    "4": (_PID_PROMPT,),
    "5": (_PID_PROMPT,),
}


def format_menu() -> str:
    """Return the numbered menu as a printable block."""
    lines = [f"\n{_MENU_TITLE}"]
    lines.extend(f"{key}. {label}" for key, label in _MENU_LABELS.items())
    return "\n".join(lines)


def prompts_for(choice: str) -> tuple[str, ...]:
    """Return the argument prompts for a menu *choice* (empty if none)."""
    return _PROMPTS.get(choice, ())


def compose_command(choice: str, answers: list[str]) -> str:
    """Build the shell command line for a menu choice and its answers.

    Only the first word of each answer is used, so a name typed with
    spaces is cut at the first space.  If any answer is blank the choice
    is returned alone, so the shell reports a usage error instead of
    shifting the remaining answers into the wrong arguments.

    Args:
        choice: The menu key the user entered.
        answers: Raw answers to ``prompts_for(choice)``, in order.

    Returns:
        A command string such as ``"1 init -1"``.

    """
    words = [choice]
    for answer in answers:
        tokens = answer.split()
        if not tokens:
            return choice
        words.append(tokens[0])
    return " ".join(words)


def run(*, registry: ProcessRegistry | None = None) -> None:
    """Run the interactive menu until the user chooses Exit.

    Ctrl+D and Ctrl+C both leave the loop cleanly.

    Args:
        registry: Registry to drive.  A fresh one is created if omitted.

    """
    shell = Shell(registry=registry if registry is not None else ProcessRegistry())

    try:
        while not shell.halted:
            print(format_menu())  # noqa: T201
            try:
                choice = input("Enter choice: ").strip()
                if choice not in MENU_ALIASES:
                    print("Invalid choice.")  # noqa: T201
                    continue
                answers = [input(prompt) for prompt in prompts_for(choice)]
            except EOFError:
                # Ctrl+D — graceful exit
                print()  # noqa: T201
                break

            result = shell.execute(compose_command(choice, answers))
            if result == Shell.EXIT_SENTINEL:
                break
            if result:
                print(result)  # noqa: T201

    except KeyboardInterrupt:
        # Ctrl+C — graceful exit
        print("\nInterrupted.")  # noqa: T201

    finally:
        print("Exiting...")  # noqa: T201
