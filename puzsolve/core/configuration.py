from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from typing import Any, Type, TypeVar

T = TypeVar("T")


class Configuration(ABC):
    """Abstract base class for every puzzle configuration the solver can search.

    A configuration is one immutable snapshot of a puzzle. Concrete subclasses must:

    1. Provide value equality and a hash consistent with it (use :func:`config_dataclass`).
    2. Implement :meth:`is_goal` and :meth:`successors`.

    The solver stores configurations as dictionary keys, so two equal
    configurations hashing differently silently breaks deduplication.
    """

    @abstractmethod
    def is_goal(self) -> bool:
        """Return ``True`` if this configuration solves the puzzle.

        Must be pure and deterministic for a given value.
        """
        pass

    @abstractmethod
    def successors(self) -> tuple["Configuration", ...]:
        """Return every configuration reachable in exactly one step.

        The order must be fixed and documented by the puzzle, because the solver
        breaks ties between equally short paths by discovery order.  A
        configuration without legal moves returns an empty tuple; this method
        never raises for a reachable configuration.  Each returned configuration
        is a new value, never an alias of ``self``.

        Returns:
            A tuple of successor configurations, possibly with repeated entries.
        """
        pass


def config_dataclass(cls: Type[T] | None = None, **kwargs: Any):
    """
    Decorator used to define an immutable, hashable configuration dataclass.

    Default behavior:
    - ``frozen=True`` and ``eq=True``, so the generated ``__hash__`` follows the
      generated ``__eq__`` field by field.
    - Mutable configurations are rejected, as is any combination that leaves
      the class without a hash.
    """

    def wrap(target_cls: Type[T]) -> Type[T]:
        call_kwargs = dict(kwargs)
        call_kwargs.setdefault("frozen", True)
        call_kwargs.setdefault("eq", True)

        if not call_kwargs["frozen"]:
            raise ValueError(
                f"{target_cls.__name__} must be frozen; the solver keeps configurations as dict keys."
            )

        dc_cls = dataclasses.dataclass(target_cls, **call_kwargs)

        if getattr(dc_cls, "__hash__", None) is None:
            # eq=False with a user __eq__, or unsafe_hash tricks gone wrong.
            raise ValueError(
                f"{target_cls.__name__} must define a hash consistent with its equality."
            )

        return dc_cls

    if cls is None:
        return wrap
    return wrap(cls)
