from __future__ import annotations

"""singleton.py
Base-class for services that hold exactly one application-wide instance.

Subclasses **must** guard their ``__init__`` against re-initialisation (the
same object is returned on every call).  :meth:`Singleton.reset_instance`
drops the cached object so tests can start from a clean slate.
"""

from typing import Any


class Singleton:  # noqa: D101 – trivial helper
    _instance: Singleton | None = None

    def __new__(cls, *args: Any, **kwargs: Any):
        # Look the instance up on *cls* itself so each subclass gets its own.
        if cls.__dict__.get("_instance") is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the cached instance; the next call constructs a fresh one."""
        cls._instance = None
