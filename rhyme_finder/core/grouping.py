"""Group records into buckets keyed by a field or a derived value."""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from operator import attrgetter, itemgetter
from typing import Any, Callable, Dict, Hashable, Iterable, List, Tuple, TypeVar, Union

from .errors import InvalidKeySelector

__all__ = ["KeySelector", "group_by", "resolve_key", "sort_group_keys"]

T = TypeVar("T")

KeySelector = Union[str, Callable[[Any], Hashable]]


def _field_reader(name: str) -> Callable[[Any], Hashable]:
    read_item = itemgetter(name)
    read_attr = attrgetter(name)

    def read(record: Any) -> Hashable:
        if isinstance(record, Mapping):
            return read_item(record)
        return read_attr(record)

    return read


def resolve_key(key: KeySelector) -> Callable[[Any], Hashable]:
    """Turn a field name or callable into a single key function.

    A non-empty string reads that field off each record: the mapping item for
    mappings, the attribute otherwise. Missing fields raise ``KeyError`` or
    ``AttributeError`` rather than landing in a ``None`` bucket.
    """

    if isinstance(key, str):
        if not key:
            raise InvalidKeySelector(key)
        return _field_reader(key)
    if callable(key):
        return key
    raise InvalidKeySelector(key)


def _mixed_order(key: Hashable) -> Tuple[int, str, Any]:
    if key is None:
        return (3, "", "")
    if isinstance(key, Real) and not isinstance(key, bool):
        return (0, "", key)
    if isinstance(key, str):
        return (1, "", key)
    return (2, type(key).__qualname__, repr(key))


def sort_group_keys(keys: Iterable[T]) -> List[T]:
    """Sort keys ascending, falling back to a fixed cross-type order.

    Mutually comparable keys use their natural order. Otherwise numbers come
    first, then strings, then other types by type name and ``repr``, and
    ``None`` last.
    """

    distinct = list(keys)
    try:
        return sorted(distinct)
    except TypeError:
        return sorted(distinct, key=_mixed_order)


def group_by(records: Iterable[T], key: KeySelector) -> Dict[Hashable, List[T]]:
    """Partition ``records`` into lists keyed by ``key``, in ascending key order.

    ``group_by([{"team": "red"}, {"team": "blue"}, {"team": "red"}], "team")``
    returns ``{"blue": [...], "red": [{"team": "red"}, {"team": "red"}]}``.
    Records keep their input order inside each group and are never copied.
    """

    key_fn = resolve_key(key)

    buckets: Dict[Hashable, List[T]] = {}
    for record in records:
        buckets.setdefault(key_fn(record), []).append(record)

    return {group: buckets[group] for group in sort_group_keys(buckets)}
