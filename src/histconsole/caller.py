"""Caller identification for history records.

Turns the frame that invoked a console method into a short label:

- ``'null'`` when the call came from module level (no enclosing function)
- the function's declared name when it has one
- otherwise the first ``function_snippet_length`` characters of its source,
  whitespace-collapsed, which keeps lambdas and comprehensions recognizable
"""

import inspect
import os
import re
from types import CodeType, FrameType
from typing import Optional

from histconsole.errors import CallerUnavailableError


NO_CALLER = 'null'

# Source text is cut to this length before whitespace is collapsed
SOURCE_SCAN_LIMIT = 250

DEFAULT_SNIPPET_LENGTH = 40

_WHITESPACE = re.compile(r'\s+')

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


def caller_frame(skip: int = 1) -> Optional[FrameType]:
    """Return the frame `skip` levels above the function calling this one.

    ``caller_frame()`` called from ``f`` returns the frame that called ``f``.
    None means there is no such frame.

    Raises:
        CallerUnavailableError: The interpreter does not expose frames.
    """
    frame = inspect.currentframe()
    if frame is None:
        raise CallerUnavailableError(
            "this interpreter does not support stack frame introspection"
        )
    try:
        for _ in range(skip + 1):
            frame = frame.f_back
            if frame is None:
                return None
        return frame
    finally:
        del frame


def in_package(filename: str) -> bool:
    """True if `filename` is a histconsole source file."""
    return os.path.abspath(filename).startswith(_PACKAGE_DIR)


def outside_package(frame: Optional[FrameType]) -> Optional[FrameType]:
    """First frame at or above `frame` whose code is not histconsole's own.

    A facade used as another facade's backend, and the session machinery,
    sit between user code and the interceptor that resolves the caller.
    """
    while frame is not None and in_package(frame.f_code.co_filename):
        frame = frame.f_back
    return frame


def function_source(code: CodeType) -> str:
    """Whitespace-collapsed source of `code`, or '' when unavailable."""
    try:
        source = inspect.getsource(code)
    except (OSError, TypeError):
        return ''
    return _WHITESPACE.sub(' ', source.lstrip()[:SOURCE_SCAN_LIMIT])


def resolve_function_name(func, snippet_length: int = DEFAULT_SNIPPET_LENGTH) -> str:
    """Display label for a function or code object.

    Args:
        func: Function, code object, or None for module-level callers
        snippet_length: Characters of source used for unnamed functions
    """
    code = getattr(func, '__code__', func)
    if code is None or code.co_name == '<module>':
        return NO_CALLER
    name = code.co_name
    if name.isidentifier():
        return name
    source = function_source(code) or name
    try:
        return source[:snippet_length]
    except TypeError:
        # non-integer function_snippet_length
        return source[:DEFAULT_SNIPPET_LENGTH]


def resolve_caller(frame: Optional[FrameType],
                   snippet_length: int = DEFAULT_SNIPPET_LENGTH) -> str:
    """Display label for the code running in `frame`."""
    if frame is None:
        return NO_CALLER
    return resolve_function_name(frame.f_code, snippet_length)
