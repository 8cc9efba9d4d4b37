"""@typeclass decorator and dispatch mechanism.

A typeclass is a function whose behaviour is chosen by the runtime type of
its first argument. Strategies use it where a single operation must behave
differently per value category (for example integer vs. true division).
"""

from __future__ import annotations

import dis
from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['NoInstanceError', 'TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])

_STUB_OPS = frozenset({'RESUME', 'NOP', 'RETURN_VALUE', 'CACHE'})
_CONST_OPS = frozenset({'LOAD_CONST', 'RETURN_CONST'})


class NoInstanceError(TypeError):
    """Raised when no typeclass instance is registered for a type."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(f"No instance of '{typeclass_name}' for type '{value_type.__name__}'")


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A typeclass with registered type instances.

    Dispatch looks for an instance registered for the exact type of the first
    argument, then walks its MRO, then falls back to the decorated function
    when it has a body. Resolutions are cached per concrete type; registering
    a new instance clears the cache.

    Example:
        ```python
        @typeclass
        def halve(value):
            return value / 2

        @halve.instance(int)
        def halve_int(value: int) -> int:
            return value // 2

        halve(7)
        # 3
        halve(7.0)
        # 3.5
        ```
    """

    def __init__(self, default_fn: F) -> None:
        """Initialize a typeclass with a default/fallback function.

        Args:
            default_fn: The decorated function, used as default or for signature.
        """
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_default: F | None = default_fn if _has_implementation(default_fn) else None
        self._self_instances: dict[type, Callable[..., Any]] = {}
        self._self_cache: dict[type, Callable[..., Any] | None] = {}

    def instance(self, type_: type | tuple[type, ...]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an implementation for one type or a tuple of types.

        Args:
            type_: The type (or types) the implementation handles.

        Returns:
            A decorator that registers the implementation and returns it unchanged.
        """
        types = type_ if isinstance(type_, tuple) else (type_,)

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            for t in types:
                self._self_instances[t] = fn
            self._self_cache.clear()
            return fn

        return decorator

    @property
    def instances(self) -> dict[type, Callable[..., Any]]:
        """A copy of the registered instances keyed by type."""
        return dict(self._self_instances)

    def dispatch(self, value_type: type) -> Callable[..., Any] | None:
        """Return the implementation used for `value_type`, or None."""
        try:
            return self._self_cache[value_type]
        except KeyError:
            pass

        found: Callable[..., Any] | None = None
        for base in value_type.__mro__:
            if base in self._self_instances:
                found = self._self_instances[base]
                break
        if found is None:
            found = self._self_default

        self._self_cache[value_type] = found
        return found

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the appropriate instance based on first argument."""
        if not args:
            if self._self_default is not None:
                return self._self_default(**kwargs)
            raise TypeError(f'{self._self_name}() requires at least one argument')

        impl = self.dispatch(type(args[0]))
        if impl is None:
            raise NoInstanceError(self._self_name, type(args[0]))
        return impl(*args, **kwargs)

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def _has_implementation(fn: Callable[..., Any]) -> bool:
    """Check if a function has an actual implementation (not just ...).

    Stub bodies (`...`, `pass`, a bare docstring) compile to code that only
    returns None.
    """
    code = getattr(fn, '__code__', None)
    if code is None:
        return True

    for instr in dis.get_instructions(code):
        if instr.opname in _STUB_OPS:
            continue
        if instr.opname in _CONST_OPS and instr.argval is None:
            continue
        return True
    return False


def typeclass(fn: F) -> TypeClass[F]:
    """Decorator to create a typeclass from a function signature.

    The decorated function serves as the default implementation (if it has a body)
    or just defines the signature (if the body is `...`).

    Args:
        fn: The function defining the typeclass signature.

    Returns:
        A TypeClass instance that can dispatch to registered instances.
    """
    return TypeClass(fn)
