"""
Terminal output for the command-line generator.

Messages are colored according to their kind (where the terminal supports it). Errors and warnings always go to stderr.
Everything else goes to stdout, unless stdout is reserved for the generated code, in which case `disable_stdout` keeps
status messages from getting mixed into it.

Use the `console` singleton::

    from atmfjstc.lib.variant_codegen.cli.console import console

    console.print_success("Generated code written to colors.py")
"""

import sys

from dataclasses import dataclass
from typing import Optional, Tuple

from termcolor import cprint


@dataclass(frozen=True)
class MessageStyle:
    color: Optional[str] = None
    bold: bool = False
    to_stderr: bool = False


MESSAGE_STYLES = {
    'info': MessageStyle(),
    'success': MessageStyle(color='green', bold=True),
    'warning': MessageStyle(color='yellow', bold=True, to_stderr=True),
    'error': MessageStyle(color='red', bold=True, to_stderr=True),
}


class Console:
    """
    Shows messages to the user running the generator. Don't create your own instances of this.

    Methods that just perform an action return the console itself, so calls can be chained.
    """

    _stdout_enabled: bool

    def __init__(self, enable_stdout: bool = True):
        self._stdout_enabled = enable_stdout

    def print_info(self, message: str, **kwargs) -> 'Console':
        return self.print_message('info', message, **kwargs)

    def print_success(self, message: str, **kwargs) -> 'Console':
        return self.print_message('success', message, **kwargs)

    def print_warning(self, message: str, **kwargs) -> 'Console':
        return self.print_message('warning', message, **kwargs)

    def print_error(self, message: str, **kwargs) -> 'Console':
        return self.print_message('error', message, **kwargs)

    def disable_stdout(self) -> 'Console':
        """
        Suppresses info and success messages. Use this when the generated code itself is written to stdout.
        """
        self._stdout_enabled = False
        return self

    def enable_stdout(self) -> 'Console':
        self._stdout_enabled = True
        return self

    def print_message(self, kind: str, message: str, major: bool = False, minor: bool = False) -> 'Console':
        """
        Prints a message of the given kind ('info', 'success', 'warning' or 'error').

        The `major` and `minor` flags respectively force or remove the bold highlight that the kind normally has.
        Unknown kinds are printed like 'info' messages.
        """
        style = MESSAGE_STYLES.get(kind, MESSAGE_STYLES['info'])

        if not (style.to_stderr or self._stdout_enabled):
            return self

        bold = (style.bold or major) and not minor
        stream = sys.stderr if style.to_stderr else sys.stdout

        if (style.color is None) and not bold:
            print(message, file=stream)
        else:
            cprint(message, style.color, attrs=_attrs(bold), file=stream)

        return self


def _attrs(bold: bool) -> Tuple[str, ...]:
    return ('bold',) if bold else ()


# Singleton
console = Console()
"""The console used by the command-line program."""
