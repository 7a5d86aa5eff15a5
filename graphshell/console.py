"""Line-oriented command console."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, TextIO

_BLANKS = frozenset(" \t\n\v\f\r")
_QUOTES = frozenset("\"'")


@dataclass
class CommandResult:
    """What a command handler returns: text to show and whether to stop."""

    output: str = ""
    should_exit: bool = False


CommandHandler = Callable[[list[str]], CommandResult]


def parse_line(line: str) -> list[str]:
    """Split a command line into arguments, honouring quotes and escapes inside them."""
    args: list[str] = []
    current: list[str] = []
    quote: str | None = None
    chars = iter(line)
    for c in chars:
        if quote is not None:
            if c == quote:
                quote = None
            elif c == "\\":
                current.append(next(chars, "\\"))
            else:
                current.append(c)
        elif c in _QUOTES:
            quote = c
        elif c in _BLANKS:
            if current:
                args.append("".join(current))
                current = []
        else:
            current.append(c)
    if current:
        args.append("".join(current))
    return args


class Console:
    """Reads commands, dispatches them to registered handlers and prints the results."""

    def __init__(self, input_stream: TextIO | None = None, output_stream: TextIO | None = None) -> None:
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout
        self._commands: dict[str, CommandHandler] = {}
        self._man: dict[str, str] = {}

    def register_command(self, name: str, handler: CommandHandler) -> None:
        self._commands[name] = handler

    def document_command(self, name: str, description: str) -> None:
        self._man[name] = description

    def registered_commands(self) -> list[str]:
        return list(self._commands)

    def man(self) -> dict[str, str]:
        """Command descriptions, keyed by command name."""
        return dict(self._man)

    def _write(self, text: str) -> None:
        self._output.write(text + "\n")

    def get_input(self) -> str:
        """Prompt for and read one line; raise EOFError when input is exhausted."""
        self._output.write("-> ")
        self._output.flush()
        line = self._input.readline()
        if not line:
            raise EOFError("no more input")
        return line.removesuffix("\n")

    def run(self) -> int:
        """Run the command loop; return 0 after an exit command, 1 when input ends."""
        while True:
            try:
                line = self.get_input()
            except EOFError:
                print("Error reading line. Exiting...", file=sys.stderr)
                return 1
            args = parse_line(line)
            if not args:
                continue
            handler = self._commands.get(args[0])
            if handler is None:
                self._write(f"Unknown command: {args[0]}")
                continue
            try:
                result = handler(args)
            except RuntimeError as exc:
                self._write(str(exc))
                continue
            if result.output:
                self._write(result.output)
            if result.should_exit:
                return 0