"""
Error presentation for the command-line generator.

Generation errors are the user's to fix (a malformed declaration, a missing doc file), so they are shown as a single
message. Anything else is a bug in the generator and is shown with its traceback.
"""

import sys
import traceback

from typing import NoReturn, ContextManager, Optional, Callable
from textwrap import dedent, indent
from functools import wraps
from contextlib import contextmanager

from atmfjstc.lib.variant_codegen.cli.console import console


class DescriptiveError(RuntimeError):
    """
    An error whose message says everything the user needs to know. Only the message is shown, never the traceback.

    Meant for the CLI layer only: library code cannot know whether its errors deserve this treatment.
    """


def fail(message: str) -> NoReturn:
    """
    Aborts the program with a `DescriptiveError`. The message is dedented, so it can be given as a triple-quoted block.
    """
    raise DescriptiveError(dedent(message).strip())


@contextmanager
def descriptive_errors(*classes: type) -> ContextManager[None]:
    """
    Use ``with descriptive_errors(Exc1, Exc2, ...): <code>`` to present exceptions of the given classes (or their
    subclasses) as descriptive errors.
    """
    try:
        yield
    except BaseException as e:
        if not isinstance(e, classes):
            raise

        raise DescriptiveError(short_format_exception(e, force_descriptive=True)) from e.__cause__


def format_exception_head(exception: BaseException) -> str:
    """The exception class and message, as the interpreter would print them, without a trailing newline"""
    return ''.join(traceback.format_exception_only(type(exception), exception)).rstrip()


def short_format_exception(exception: BaseException, force_descriptive: bool = False) -> str:
    """
    Formats an exception as a short message: just the message for descriptive errors, the class and message otherwise.
    """
    if isinstance(exception, KeyboardInterrupt):
        return "User aborted operation"

    if force_descriptive or isinstance(exception, DescriptiveError):
        return str(exception) or type(exception).__name__

    return format_exception_head(exception)


def pretty_print_exception(exception: BaseException):
    if isinstance(exception, SystemExit):
        return
    if isinstance(exception, KeyboardInterrupt):
        console.print_warning("Stopped by user")
        return

    if isinstance(exception, DescriptiveError):
        console.print_error(short_format_exception(exception))

        cause = exception.__cause__
        while cause is not None:
            console.print_error(indent(short_format_exception(cause, force_descriptive=True), '  '), minor=True)
            cause = cause.__cause__

        return

    console.print_error(''.join(traceback.format_exception(exception)).rstrip())


def pretty_unhandled(on_crash: Optional[Callable[[], None]] = None) -> Callable:
    """
    Decorator for the main function. Unhandled exceptions are printed nicely (see `pretty_print_exception`) and then
    the program exits with status 1, or `on_crash` is called instead, if given.

    `SystemExit` passes through untouched. A `KeyboardInterrupt` exits with status 130.
    """

    def real_decorator(main_function):
        @wraps(main_function)
        def wrapper(*args, **kwargs):
            try:
                return main_function(*args, **kwargs)
            except SystemExit:
                raise
            except KeyboardInterrupt as e:
                pretty_print_exception(e)
                sys.exit(130)
            except BaseException as e:
                pretty_print_exception(e)

            if on_crash is None:
                sys.exit(1)

            on_crash()

        return wrapper

    return real_decorator
