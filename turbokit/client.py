"""Client-side program data: query results, program files and events, documents."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from turbokit.encoding import decode, encode

T = TypeVar("T")

STATUS_PENDING = 1
STATUS_FAILED = 2

_U32_MAX = 0xFFFF_FFFF

Raw = Union[str, bytes, bytearray, memoryview]


@dataclass
class QueryResult(Generic[T]):
    """Outcome of a query: whether it is loading, its data and any error message."""

    loading: bool = False
    data: Optional[T] = None
    error: Optional[str] = None


def _load_object(raw: Raw) -> dict[str, Any]:
    if isinstance(raw, (bytes, bytearray, memoryview)):
        raw = bytes(raw).decode("utf-8")
    obj = json.loads(raw)
    if not isinstance(obj, dict):
        raise ValueError("expected a JSON object")
    return obj


def _require(obj: dict[str, Any], name: str) -> Any:
    if name not in obj:
        raise ValueError(f"missing field `{name}`")
    return obj[name]


def _str(obj: dict[str, Any], name: str) -> str:
    value = _require(obj, name)
    if not isinstance(value, str):
        raise ValueError(f"field `{name}` must be a string")
    return value


def _opt_str(obj: dict[str, Any], name: str) -> Optional[str]:
    value = obj.get(name)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field `{name}` must be a string or null")
    return value


def _u32(obj: dict[str, Any], name: str) -> int:
    value = _require(obj, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{name}` must be an integer")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"field `{name}` is out of range for u32: {value}")
    return value


def _b64(obj: dict[str, Any], name: str) -> bytes:
    return decode(_str(obj, name))


@dataclass
class ProgramFile:
    """A program file with its metadata and raw contents."""

    checksum: str
    contents: bytes
    created_at: int
    updated_at: int
    prev_txn_hash: Optional[str]
    txn_hash: str
    version: int

    @classmethod
    def from_json(cls, raw: Raw) -> ProgramFile:
        """Parse a JSON document; ``contents`` is base64. Raises ValueError on bad input."""
        obj = _load_object(raw)
        return cls(
            checksum=_str(obj, "checksum"),
            contents=_b64(obj, "contents"),
            created_at=_u32(obj, "created_at"),
            updated_at=_u32(obj, "updated_at"),
            prev_txn_hash=_opt_str(obj, "prev_txn_hash"),
            txn_hash=_str(obj, "txn_hash"),
            version=_u32(obj, "version"),
        )

    def to_json(self) -> str:
        """Serialise to JSON with ``contents`` as standard base64."""
        return json.dumps(
            {
                "checksum": self.checksum,
                "contents": encode(self.contents),
                "created_at": self.created_at,
                "updated_at": self.updated_at,
                "prev_txn_hash": self.prev_txn_hash,
                "txn_hash": self.txn_hash,
                "version": self.version,
            }
        )


@dataclass
class ProgramEvent:
    """An event emitted by a program; ``kind`` is the JSON field ``type``."""

    id: str
    created_at: int
    program_id: str
    tx_hash: str
    kind: str
    data: bytes

    @classmethod
    def from_json(cls, raw: Raw) -> ProgramEvent:
        """Parse a JSON document; ``data`` is base64. Raises ValueError on bad input."""
        obj = _load_object(raw)
        return cls(
            id=_str(obj, "id"),
            created_at=_u32(obj, "created_at"),
            program_id=_str(obj, "program_id"),
            tx_hash=_str(obj, "tx_hash"),
            kind=_str(obj, "type"),
            data=_b64(obj, "data"),
        )

    def to_json(self) -> str:
        """Serialise to JSON with ``data`` as standard base64."""
        return json.dumps(
            {
                "id": self.id,
                "created_at": self.created_at,
                "program_id": self.program_id,
                "tx_hash": self.tx_hash,
                "type": self.kind,
                "data": encode(self.data),
            }
        )


def build_query(opts: Union[Mapping[Any, Any], Iterable[tuple[Any, Any]]]) -> str:
    """Join key/value pairs into ``k=v`` terms separated by ``&``."""
    pairs = opts.items() if isinstance(opts, Mapping) else opts
    return "&".join(f"{key}={value}" for key, value in pairs)


def split_program_path(path: Union[str, PurePosixPath]) -> tuple[str, str]:
    """Split a path into its program id (first component) and the file path after it."""
    parts = PurePosixPath(path).parts
    if not parts:
        return "", ""
    rest = parts[1:]
    return parts[0], str(PurePosixPath(*rest)) if rest else ""


def query_result_from_response(
    status: int,
    data: Optional[bytes],
    error: Optional[bytes],
    model: Any,
) -> QueryResult[Any]:
    """Build a QueryResult from a host response.

    ``model`` provides ``from_json``. A failed status yields a network error;
    a returned error message takes precedence over a parse error.
    """
    if status == STATUS_FAILED:
        return QueryResult(loading=False, data=None, error="NetworkError")
    result: QueryResult[Any] = QueryResult(loading=status == STATUS_PENDING)
    if data:
        try:
            result.data = model.from_json(bytes(data))
        except ValueError as exc:
            result.error = str(exc)
    if error:
        result.error = bytes(error).decode("utf-8", errors="replace")
    return result


class DocumentQueryResult(Generic[T]):
    """A query result for a document at a path, decodable into a value."""

    def __init__(self, path: Union[str, PurePosixPath], result: QueryResult[ProgramFile]) -> None:
        self.path = PurePosixPath(path)
        self._result = result

    def __repr__(self) -> str:
        return f"DocumentQueryResult(path={str(self.path)!r}, result={self._result!r})"

    def data(self) -> Optional[ProgramFile]:
        """The program file, if one was returned."""
        return self._result.data

    def loading(self) -> bool:
        """Whether the document is still loading."""
        return self._result.loading

    def error(self) -> Optional[str]:
        """The error message, if any."""
        return self._result.error

    def parse(self, decoder: Callable[[bytes], T]) -> Optional[T]:
        """Decode the file contents with ``decoder``; None if absent or undecodable."""
        file = self._result.data
        if file is None:
            return None
        try:
            return decoder(file.contents)
        except (ValueError, TypeError, KeyError, IndexError, EOFError):
            return None