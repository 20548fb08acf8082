from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from remote_configs.domain.errors import TypeMismatchError

T = TypeVar("T")

Parser = Callable[[object], Any]

# Sequence containers accepted by finds_or_none; str, bytes and mappings are not sequences here.
_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def find_or_none(
    raw: object,
    kind: type[T] | Any = object,
    parser: Parser | None = None,
) -> T | None:
    # Parser wins when supplied; otherwise coerce with pydantic (lax mode).
    if raw is None:
        return None
    if parser is not None:
        return parser(raw)
    if _is_passthrough(kind):
        return raw  # type: ignore[return-value]
    if _is_bool_for_other_kind(raw, kind):
        raise TypeMismatchError(f"Cannot use bool as {_kind_name(kind)}")
    if isinstance(kind, type) and isinstance(raw, kind):
        return raw
    try:
        return _adapter(kind).validate_python(raw)
    except ValidationError as exc:
        raise TypeMismatchError(
            f"Cannot coerce {type(raw).__name__} to {_kind_name(kind)}: {exc.error_count()} error(s)"
        ) from exc


def finds_or_none(
    raw: object,
    kind: type[T] | Any = object,
    parser: Parser | None = None,
) -> list[T] | None:
    """Coerce every candidate of a sequence independently.

    Candidates that fail to parse or coerce are dropped. When nothing
    survives the result is ``None`` so callers can fall back to a default.
    """
    if raw is None:
        return None
    if not isinstance(raw, _SEQUENCE_TYPES):
        raise TypeMismatchError(f"Expected a sequence for {_kind_name(kind)}, got {type(raw).__name__}")

    values: list[T] = []
    for candidate in raw:
        try:
            value = find_or_none(candidate, kind, parser)
        except Exception:
            # A failing candidate is dropped; the rest of the sequence still counts.
            continue
        if value is None or not conforms(value, kind):
            continue
        values.append(value)
    return values or None


def conforms(value: object, kind: type[T] | Any) -> bool:
    # Checks an already-produced value without coercing it.
    if _is_passthrough(kind):
        return True
    if _is_bool_for_other_kind(value, kind):
        return False
    if isinstance(kind, type):
        return isinstance(value, kind)
    try:
        _adapter(kind).validate_python(value, strict=True)
    except ValidationError:
        return False
    return True


def _is_passthrough(kind: object) -> bool:
    return kind is object or kind is Any


def _is_bool_for_other_kind(value: object, kind: object) -> bool:
    # bool subclasses int, but a flag is never an acceptable number.
    return isinstance(value, bool) and isinstance(kind, type) and not issubclass(kind, bool)


@lru_cache(maxsize=256)
def _adapter(kind: Any) -> TypeAdapter[Any]:
    # One adapter per kind.
    return TypeAdapter(kind)


def _kind_name(kind: object) -> str:
    if isinstance(kind, type):
        return kind.__name__
    return repr(kind)
