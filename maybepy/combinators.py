from __future__ import annotations
from inspect import Parameter, signature
from typing import Any, Callable, Iterable, List, TypeVar

from .maybe import Maybe, none, some

T = TypeVar("T")
U = TypeVar("U")

_POSITIONAL = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


def _takes_index(fn: Callable[..., Any]) -> bool:
    try:
        params = signature(fn).parameters.values()
    except (TypeError, ValueError):
        return True
    if any(p.kind == Parameter.VAR_POSITIONAL for p in params):
        return True
    required = [p for p in params if p.kind in _POSITIONAL and p.default is Parameter.empty]
    return len(required) >= 2


def traverse(items: Iterable[T], try_map: Callable[..., Maybe[U]]) -> Maybe[List[U]]:
    """Map every item with `try_map` and collect the values that are present.

    `try_map` is called once per item, in order, as `try_map(item, index)`
    (or `try_map(item)` when it requires a single argument). Items mapped to
    no value are skipped. The result is none only when nothing was collected.
    """
    call = try_map if _takes_index(try_map) else (lambda item, _index: try_map(item))
    collected: List[U] = []
    for index, item in enumerate(items):
        call(item, index).match(some=collected.append, none=lambda: None)
    return some(collected).filter(lambda xs: len(xs) > 0)


def apply(fn: Maybe[Callable[[T], U]], arg: Maybe[T]) -> Maybe[U]:
    """Apply an optional function to an optional argument.

    Curried functions are applied one argument per call.
    """
    return fn.match(
        some=lambda f: arg.map(f),
        none=lambda: none(),
    )


def map_n(fn: Callable[..., U], *maybe_args: Maybe[Any]) -> Maybe[U]:
    """Call `fn` with the unwrapped values when every argument has a value."""
    return (
        traverse(maybe_args, lambda x: x)
        .filter(lambda args: len(args) == len(maybe_args))
        .map(lambda args: fn(*args))
    )
