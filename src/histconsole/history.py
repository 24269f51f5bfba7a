"""History log: the ordered record of intercepted console calls.

A record is a plain list::

    ['debug', 'x', 'caller:main']

Element 0 is the method kind; the optional last element is the caller
label. The log is append-only from the interceptor's point of view, and
callers read it directly as a list or serialize it for error reports.
"""

import json
from pathlib import Path
from typing import Any, List


CALLER_PREFIX = 'caller:'


def record_kind(record: List[Any]) -> str:
    return record[0]


def record_caller(record: List[Any]):
    """Caller label of `record`, or None when the record has none."""
    last = record[-1] if len(record) > 1 else None
    if isinstance(last, str) and last.startswith(CALLER_PREFIX):
        return last[len(CALLER_PREFIX):]
    return None


def record_args(record: List[Any]) -> List[Any]:
    """Normalized arguments of `record`, without the kind and caller."""
    end = -1 if record_caller(record) is not None else len(record)
    return record[1:end]


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    return repr(value)


class HistoryLog(list):
    """Ordered list of history records for one console facade."""

    def to_jsonable(self) -> List[List[Any]]:
        """Copy of the log with every value reduced to JSON types.

        Values JSON cannot represent are replaced by their repr().
        """
        return [_jsonable(record) for record in self]

    def dumps(self, indent: int = None) -> str:
        return json.dumps(self.to_jsonable(), indent=indent)

    def save(self, path) -> Path:
        """Write the log as JSON to `path` and return the path."""
        path = Path(path)
        path.write_text(self.dumps(indent=2) + "\n", encoding="utf-8")
        return path

    @classmethod
    def load(cls, path) -> "HistoryLog":
        """Read a log written by save().

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the file is not a JSON list of records.
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list) or not all(
                isinstance(r, list) and r for r in data):
            raise ValueError(f"{path} does not contain a list of history records")
        return cls(data)
