# aad/core/env.py
from __future__ import annotations
import numbers
from collections.abc import Mapping
from typing import Dict, Iterator, Optional

import numpy as np

from .errors import UnboundVariable


class Environment(Mapping):
    """
    Immutable binding of integer variable ids to float values.

    `update` never touches the receiver: it returns a new Environment holding
    the previous bindings plus (or overriding) the new one. Values are stored
    as np.float64 so that evaluation follows IEEE semantics end to end.
    """

    __slots__ = ("_bindings",)

    def __init__(self, bindings: Optional[Mapping] = None):
        store: Dict[int, np.float64] = {}
        if bindings is not None:
            for var_id, value in bindings.items():
                store[_check_id(var_id)] = _as_float(value)
        self._bindings = store

    @classmethod
    def _from_store(cls, store: Dict[int, np.float64]) -> "Environment":
        env = cls.__new__(cls)
        env._bindings = store
        return env

    def update(self, var_id: int, value) -> "Environment":
        store = dict(self._bindings)
        store[_check_id(var_id)] = _as_float(value)
        return Environment._from_store(store)

    def lookup(self, var_id: int) -> np.float64:
        try:
            return self._bindings[var_id]
        except KeyError:
            raise UnboundVariable(var_id) from None

    # Mapping protocol
    def __getitem__(self, var_id: int) -> np.float64:
        return self.lookup(var_id)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self):
        items = ", ".join(f"{k}: {float(v)!r}" for k, v in sorted(self._bindings.items()))
        return f"Environment({{{items}}})"


def _check_id(var_id) -> int:
    if isinstance(var_id, bool) or not isinstance(var_id, numbers.Integral):
        raise TypeError(f"variable ids must be integers, but got {type(var_id)}")
    return int(var_id)


def _as_float(value) -> np.float64:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Environment only accepts real numbers, but got {type(value)}")
    return np.float64(value)


EMPTY = Environment()


def empty() -> Environment:
    """The Environment with no bindings."""
    return EMPTY


def update(var_id: int, value, env: Environment) -> Environment:
    """Pipeline-friendly form of `env.update(var_id, value)`."""
    return env.update(var_id, value)


def lookup(var_id: int, env: Environment) -> np.float64:
    """`env.lookup(var_id)`; raises UnboundVariable when the id is absent."""
    return env.lookup(var_id)
