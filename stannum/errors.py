"""Nested Validation Errors

An Errors object is a tree of error records keyed by path segments. Each
node holds its own records plus child nodes, created on first access:

    errors = Errors()
    errors["manufacturer"]["factory"].add("stannum.constraints.absent")
    errors.to_list()
    # [{"type": "stannum.constraints.absent", "message": None, "data": {},
    #   "path": ["manufacturer", "factory"]}]

Record Format:
{
    "type": "stannum.constraints.is_not_type",
    "message": None,
    "data": {"required": True, "type": int},
    "path": ["towns", 1, "name"],
}

Records are deduplicated per node by type, message and data. Flattening is
depth-first: a node's own records come first, then each child's records in
the order the children were created.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator

if TYPE_CHECKING:
    from stannum.messages import MessageStrategy

PathSegment = int | str
ErrorRecord = dict[str, Any]


def _hashable(value: Any) -> Any:
    """Structural, hashable stand-in for a record value."""
    if isinstance(value, dict):
        return ("dict", frozenset((_hashable(k), _hashable(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return (type(value).__name__, tuple(_hashable(item) for item in value))
    if isinstance(value, (set, frozenset)):
        return ("set", frozenset(_hashable(item) for item in value))
    try:
        hash(value)
    except TypeError:
        return ("repr", type(value), repr(value))
    return (type(value), value)


def _record_key(error_type: str, message: str | None, data: dict[str, Any]) -> Any:
    return (error_type, message, _hashable(data))


def _flattened_key(record: ErrorRecord) -> Any:
    return (_record_key(record["type"], record.get("message"), record.get("data", {})),
            tuple(record.get("path", ())))


def as_path_segment(key: Any) -> PathSegment:
    """Map an arbitrary collection key onto a valid path segment.

    Integers and non-blank strings are kept; anything else (tuples, None,
    blank strings) is keyed by its repr.
    """
    if isinstance(key, str) and key: return key
    if isinstance(key, int) and not isinstance(key, bool): return key
    return repr(key)


class Errors:
    """Path-addressed, deduplicating accumulator of error records.

    Errors never raise during validation; constraints write into an Errors
    node and callers inspect the flattened records afterwards.
    """

    __hash__ = None

    def __init__(self) -> None:
        self._records: dict[Any, ErrorRecord] = {}
        self._children: dict[PathSegment, Errors] = {}

    # ========================================================================
    # Tree Access
    # ========================================================================

    def __getitem__(self, key: PathSegment) -> Errors:
        """Return the child node at key, creating it on first access."""
        key = self._normalize_key(key)
        if key not in self._children:
            self._children[key] = Errors()
        return self._children[key]

    def __setitem__(self, key: PathSegment, value: Errors | list[ErrorRecord] | None) -> None:
        """Replace the entire subtree at key.

        Accepts None or an empty list (clears the subtree), another Errors
        (deep-copied), or a list of error records, each with at least a type.
        """
        key = self._normalize_key(key)
        self._children[key] = self._coerce_subtree(value)

    def dig(self, *keys: PathSegment) -> Errors:
        """Descend through keys, creating nodes as needed."""
        node = self
        for key in keys:
            node = node[key]
        return node

    # ========================================================================
    # Adding Errors
    # ========================================================================

    def add(self, error_type: str, /, message: str | None = None, **data: Any) -> Errors:
        """Add an error record to this node. Returns self for chaining.

        An identical record (same type, message and data) already present at
        this node is not added again.
        """
        error_type = self._normalize_type(error_type)
        message = self._normalize_message(message)
        key = _record_key(error_type, message, data)
        if key not in self._records:
            self._records[key] = {"data": dict(data), "message": message, "type": error_type}
        return self

    def merge(self, other: Errors | Iterable[ErrorRecord]) -> Errors:
        """Return a copy of self with other's records added at their paths."""
        return self.copy().update(other)

    def update(self, other: Errors | Iterable[ErrorRecord]) -> Errors:
        """Add other's records to self at their paths. Returns self."""
        if not isinstance(other, (Errors, list, tuple)):
            raise TypeError("value must be an instance of Errors or an array of error hashes")
        for record in list(other):
            self._add_record(record)
        return self

    # ========================================================================
    # Reading Errors
    # ========================================================================

    def __iter__(self) -> Iterator[ErrorRecord]:
        """Yield every record depth-first with its path relative to this node."""
        for record in self._records.values():
            yield {**record, "data": dict(record["data"]), "path": []}
        for key, child in self._children.items():
            for record in child:
                yield {**record, "path": [key, *record["path"]]}

    def __len__(self) -> int:
        return len(self._records) + sum(len(child) for child in self._children.values())

    @property
    def size(self) -> int: return len(self)

    @property
    def is_empty(self) -> bool: return len(self) == 0

    def to_list(self) -> list[ErrorRecord]:
        return list(self)

    def group_by_path(self) -> dict[tuple[PathSegment, ...], list[ErrorRecord]]:
        """Group flattened records by path."""
        groups: dict[tuple[PathSegment, ...], list[ErrorRecord]] = {}
        for record in self:
            groups.setdefault(tuple(record["path"]), []).append(record)
        return groups

    def summary(self, strategy: MessageStrategy | Callable[..., str] | None = None) -> str:
        """Render every record as "path.to: message", joined by commas."""
        items = []
        for record in self.with_messages(strategy):
            if not record["path"]:
                items.append(record["message"])
            else:
                items.append(f"{'.'.join(str(seg) for seg in record['path'])}: {record['message']}")
        return ", ".join(items)

    def with_messages(
        self,
        strategy: MessageStrategy | Callable[..., str] | None = None,
        *,
        force: bool = False,
    ) -> Errors:
        """Return a copy whose records carry generated messages.

        Args:
            strategy: Callable taking (error_type, **data) and returning a message.
                Defaults to a fresh stannum.messages.DefaultStrategy.
            force: If True, replace messages that are already set.
        """
        if strategy is None:
            from stannum.messages import DefaultStrategy

            strategy = DefaultStrategy()

        copied = Errors()
        for record in self:
            message = record["message"]
            if message is None or force:
                message = strategy(record["type"], **record["data"])
            copied.dig(*record["path"]).add(record["type"], message, **record["data"])
        return copied

    def copy(self) -> Errors:
        """Deep copy of the tree structure; data values are shared."""
        copied = Errors()
        copied._records = {key: {**record, "data": dict(record["data"])} for key, record in self._records.items()}
        copied._children = {key: child.copy() for key, child in self._children.items()}
        return copied

    __copy__ = copy

    # ========================================================================
    # Comparison
    # ========================================================================

    def __eq__(self, other: object) -> bool:
        """Order-independent comparison of flattened records."""
        if not isinstance(other, (Errors, list)):
            return NotImplemented
        if isinstance(other, list) and not all(isinstance(item, dict) for item in other):
            return False
        own = {_flattened_key(record) for record in self}
        theirs = {_flattened_key(record) for record in other}
        return own == theirs

    def __repr__(self) -> str:
        return f"Errors({self.to_list()!r})"

    # ========================================================================
    # Internals
    # ========================================================================

    def _add_record(self, record: ErrorRecord) -> None:
        if not isinstance(record, dict) or "type" not in record:
            raise ValueError("error hash must have a type")
        node = self.dig(*record.get("path", ()))
        node.add(record["type"], record.get("message"), **(record.get("data") or {}))

    def _coerce_subtree(self, value: Errors | list[ErrorRecord] | None) -> Errors:
        if value is None:
            return Errors()
        if isinstance(value, Errors):
            return value.copy()
        if isinstance(value, (list, tuple)):
            subtree = Errors()
            for record in value:
                subtree._add_record(record)
            return subtree
        raise TypeError("value must be an instance of Errors or an array of error hashes")

    @staticmethod
    def _normalize_key(key: PathSegment) -> PathSegment:
        if isinstance(key, bool) or not isinstance(key, (int, str)):
            raise TypeError("key must be an integer or a string")
        if isinstance(key, str) and not key:
            raise ValueError("key can't be blank")
        return key

    @staticmethod
    def _normalize_message(message: str | None) -> str | None:
        if message is None:
            return None
        if not isinstance(message, str):
            raise TypeError("message must be a string")
        if not message:
            raise ValueError("message can't be blank")
        return message

    @staticmethod
    def _normalize_type(error_type: str) -> str:
        if error_type is None:
            raise ValueError("error type can't be None")
        if not isinstance(error_type, str):
            raise TypeError("error type must be a string")
        if not error_type:
            raise ValueError("error type can't be blank")
        return error_type
