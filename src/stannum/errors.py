"""
stannum — structured, path-addressed validation errors.

Purpose
- Accumulate validation failures in a tree keyed by property path and expose
  them as flat ``ErrorRecord`` values.

Behavior
- Child nodes are created lazily on first access and cached, so repeated
  ``errors["name"]["first"]`` lookups always mutate the same logical node.
- Iteration yields the node's own records first, then each child's records in
  child creation order, with the child key prepended to the record path.
- Equality compares the flattened records as a multiset, independent of the
  sequence of operations that built either tree.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, TypeAlias

from stannum.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from stannum.messages import MessageStrategy

ErrorKey: TypeAlias = str | int
ErrorPath: TypeAlias = tuple[ErrorKey, ...]


@dataclass(frozen=True, slots=True)
class ErrorRecord:
    """One structured failure: type id, optional message, data and path."""

    type: str
    message: str | None = None
    data: Mapping[str, Any] = field(default_factory=dict)
    path: ErrorPath = ()

    def __hash__(self) -> int:
        return hash((self.type, self.message, self.path))

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> ErrorRecord:
        """Build a record from a ``{"type", "message", "data", "path"}`` mapping."""

        if "type" not in payload:
            raise InvalidArgumentError("error record requires a 'type'")
        error_type = _normalize_type(payload["type"])
        message = _normalize_message(payload.get("message"))
        raw_data = payload.get("data") or {}
        if not isinstance(raw_data, Mapping):
            raise InvalidArgumentError("error record 'data' must be a mapping")
        raw_path = payload.get("path") or ()
        if isinstance(raw_path, (str, bytes)) or not isinstance(raw_path, Iterable):
            raise InvalidArgumentError("error record 'path' must be a sequence of keys")
        return cls(
            type=error_type,
            message=message,
            data=dict(raw_data),
            path=tuple(_normalize_key(key) for key in raw_path),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": dict(self.data),
            "message": self.message,
            "path": list(self.path),
            "type": self.type,
        }


class Errors:
    """Hierarchical multi-map of error records addressed by property path."""

    __slots__ = ("_children", "_records")

    def __init__(self) -> None:
        self._records: list[tuple[str, str | None, dict[str, Any]]] = []
        self._children: dict[ErrorKey, Errors] = {}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Errors):
            other_records = list(other)
        elif isinstance(other, (list, tuple)):
            try:
                other_records = [_coerce_record(item) for item in other]
            except InvalidArgumentError:
                return False
        else:
            return NotImplemented
        return _same_records(list(self), other_records)

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, key: ErrorKey) -> Errors:
        normalized = _normalize_key(key)
        child = self._children.get(normalized)
        if child is None:
            child = Errors()
            self._children[normalized] = child
        return child

    def __setitem__(self, key: ErrorKey, value: Errors | Iterable[object] | None) -> None:
        normalized = _normalize_key(key)
        self._children[normalized] = _coerce_errors(value)

    def __iter__(self) -> Iterator[ErrorRecord]:
        for error_type, message, data in self._records:
            yield ErrorRecord(type=error_type, message=message, data=dict(data))
        for key, child in self._children.items():
            for record in child:
                yield replace(record, path=(key, *record.path))

    def __len__(self) -> int:
        return len(self._records) + sum(len(child) for child in self._children.values())

    def __repr__(self) -> str:
        return f"Errors({self.to_list()!r})"

    def __copy__(self) -> Errors:
        return self.copy()

    def add(self, error_type: str, /, *, message: str | None = None, **data: Any) -> Errors:
        """Append a record to this node and return ``self`` for chaining."""

        return self._append(error_type, message, data)

    def copy(self) -> Errors:
        """Deep structural copy; mutating the copy never affects the original."""

        duplicate = Errors()
        duplicate._records = [
            (error_type, message, dict(data)) for error_type, message, data in self._records
        ]
        duplicate._children = {key: child.copy() for key, child in self._children.items()}
        return duplicate

    def dig(self, *keys: ErrorKey | Iterable[ErrorKey]) -> Errors:
        """Return the (lazily created) descendant node at ``keys``.

        Accepts either separate keys (``dig("a", 0)``) or a single sequence
        (``dig(["a", 0])``). An empty path returns ``self``.
        """

        path: Iterable[Any] = keys
        if len(keys) == 1 and isinstance(keys[0], (list, tuple)):
            path = keys[0]
        node = self
        for key in path:
            node = node[key]
        return node

    def group_by_path(self) -> dict[ErrorPath, list[dict[str, Any]]]:
        grouped: dict[ErrorPath, list[dict[str, Any]]] = {}
        for record in self:
            grouped.setdefault(record.path, []).append(
                {"data": dict(record.data), "message": record.message, "type": record.type}
            )
        return grouped

    def is_empty(self) -> bool:
        return len(self) == 0

    def merge(self, other: Errors | Iterable[object]) -> Errors:
        """Return a new tree holding the records of ``self`` and ``other``."""

        return self.copy().update(other)

    def size(self) -> int:
        return len(self)

    def summary(self) -> str:
        """Comma-separated ``path: message`` summary, falling back to type ids."""

        items: list[str] = []
        for record in self:
            text = record.message if record.message is not None else record.type
            if record.path:
                items.append(f"{'.'.join(str(key) for key in record.path)}: {text}")
            else:
                items.append(text)
        return ", ".join(items)

    def to_list(self) -> list[dict[str, Any]]:
        return [record.to_dict() for record in self]

    def update(self, other: Errors | Iterable[object]) -> Errors:
        """Add every record of ``other`` in place, at the same relative path."""

        for record in _iter_records(other):
            self.dig(*record.path)._append(record.type, record.message, record.data)
        return self

    def with_messages(
        self,
        strategy: MessageStrategy | None = None,
        *,
        force: bool = False,
    ) -> Errors:
        """Return a copy with messages rendered for records that lack one."""

        if strategy is None:
            from stannum.messages import default_strategy

            strategy = default_strategy()

        rendered = Errors()
        for record in self:
            message = record.message
            if message is None or force:
                message = strategy(record.type, **record.data)
            rendered.dig(*record.path)._append(record.type, message, record.data)
        return rendered

    def _append(self, error_type: object, message: object, data: Mapping[str, Any]) -> Errors:
        self._records.append((_normalize_type(error_type), _normalize_message(message), dict(data)))
        return self


def _coerce_errors(value: Errors | Iterable[object] | None) -> Errors:
    if value is None:
        return Errors()
    if isinstance(value, Errors):
        return value.copy()
    return Errors().update(value)


def _coerce_record(item: object) -> ErrorRecord:
    if isinstance(item, ErrorRecord):
        return item
    if isinstance(item, Mapping):
        return ErrorRecord.from_mapping(item)
    raise InvalidArgumentError(
        f"error record must be an ErrorRecord or a mapping, got {type(item).__name__}"
    )


def _iter_records(other: Errors | Iterable[object]) -> list[ErrorRecord]:
    if isinstance(other, Errors):
        return list(other)
    if isinstance(other, (str, bytes, Mapping)) or not isinstance(other, Iterable):
        raise InvalidArgumentError(
            f"value must be an Errors or a sequence of error records, got {type(other).__name__}"
        )
    return [_coerce_record(item) for item in other]


def _same_records(records: list[ErrorRecord], others: list[ErrorRecord]) -> bool:
    if len(records) != len(others):
        return False
    buckets: defaultdict[tuple[str, str | None, ErrorPath], list[Mapping[str, Any]]] = (
        defaultdict(list)
    )
    for candidate in others:
        buckets[(candidate.type, candidate.message, candidate.path)].append(candidate.data)
    for record in records:
        remaining = buckets.get((record.type, record.message, record.path))
        if not remaining:
            return False
        try:
            remaining.remove(record.data)
        except ValueError:
            return False
    return True


def _normalize_key(key: object) -> ErrorKey:
    if key is None:
        raise InvalidArgumentError("key must not be None")
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        raise InvalidArgumentError(f"key must be an int or a str, got {type(key).__name__}")
    if key == "":
        raise InvalidArgumentError("key must not be an empty string")
    return key


def _normalize_message(message: object) -> str | None:
    if message is None:
        return None
    if not isinstance(message, str):
        raise InvalidArgumentError("message must be a string")
    if not message:
        raise InvalidArgumentError("message must not be empty")
    return message


def _normalize_type(error_type: object) -> str:
    if error_type is None:
        raise InvalidArgumentError("error type must not be None")
    if not isinstance(error_type, str):
        raise InvalidArgumentError("error type must be a string")
    if not error_type:
        raise InvalidArgumentError("error type must not be empty")
    return error_type


__all__ = [
    "ErrorKey",
    "ErrorPath",
    "ErrorRecord",
    "Errors",
]
