"""
Console boundary for the interactive session.

Accounts and the session runner only talk to an object with ``prompt`` and
``write``, so tests can swap in a scripted fake.
"""


class ConsoleIO:
    """Reads from stdin and writes to stdout."""

    def prompt(self, text: str = "") -> str:
        """
        Show text without a trailing newline and read one line.

        An exhausted input stream reads as an empty line.
        """
        try:
            return input(text)
        except EOFError:
            return ""

    def write(self, line: str = "") -> None:
        print(line)
