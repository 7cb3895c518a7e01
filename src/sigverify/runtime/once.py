"""
One-time initialization primitives.

Provides an explicit init guard with an observable state machine and a
lazily-constructed, process-wide instance holder built on top of it.
"""

import logging
import threading
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import ErrorCode, SigVerifyError


logger = logging.getLogger(__name__)

T = TypeVar("T")


class OnceState(Enum):
    """Init guard states. INITIALIZED is terminal."""
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    INITIALIZED = "initialized"


class Once:
    """
    Runs a function exactly once, no matter how many threads race to call it.

    Callers that arrive while the function is running block until it has
    finished, so every caller returns only after the work is complete.

    The guard never goes back to UNINITIALIZED. If the function raises, the
    guard still becomes INITIALIZED and keeps the exception: the caller that
    ran the function sees it propagate, and every later caller gets the same
    exception re-raised without the function running again.

    A guarded function that calls back into its own guard raises
    SigVerifyError instead of deadlocking.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._state = OnceState.UNINITIALIZED
        self._owner: Optional[int] = None
        self._error: Optional[BaseException] = None

    @property
    def state(self) -> OnceState:
        """Current state of the guard."""
        return self._state

    @property
    def done(self) -> bool:
        """True once the guarded function has run, successfully or not."""
        return self._state is OnceState.INITIALIZED

    @property
    def error(self) -> Optional[BaseException]:
        """Exception raised by the guarded function, or None."""
        return self._error

    def do(self, fn: Callable[[], Any]) -> bool:
        """
        Run ``fn`` if it has not yet run.

        Args:
            fn: Zero-argument callable

        Returns:
            True if this call ran ``fn``, False if it had already run

        Raises:
            SigVerifyError: If called from inside ``fn`` on the same thread
            BaseException: Whatever ``fn`` raised, on this and every later call
        """
        # Fast path: state only ever moves forward to INITIALIZED
        if self._state is OnceState.INITIALIZED:
            return self._finished()

        if self._state is OnceState.INITIALIZING and self._owner == threading.get_ident():
            raise SigVerifyError(
                "Re-entrant initialization: the guarded function called back into its own guard",
                ErrorCode.REENTRANT_INITIALIZATION,
                {"function": getattr(fn, "__qualname__", repr(fn))}
            )

        with self._lock:
            if self._state is OnceState.INITIALIZED:
                return self._finished()
            self._state = OnceState.INITIALIZING
            self._owner = threading.get_ident()
            try:
                fn()
            except BaseException as e:
                self._error = e
                raise
            finally:
                self._owner = None
                self._state = OnceState.INITIALIZED
            return True

    def _finished(self) -> bool:
        if self._error is not None:
            raise self._error
        return False


class LazyInstance(Generic[T]):
    """
    Holder for a single lazily-created instance.

    The factory runs at most once; all callers of ``get`` see the same, fully
    constructed object. If the factory raised, every call to ``get`` raises
    that same exception.
    """

    def __init__(self, factory: Callable[[], T], name: str = ""):
        """
        Initialize holder.

        Args:
            factory: Zero-argument callable that builds the instance
            name: Name used in log messages
        """
        self._factory = factory
        self._name = name or getattr(factory, "__name__", "instance")
        self._once = Once()
        self._instance: Optional[T] = None

    def _create(self) -> None:
        logger.debug(f"Initializing {self._name}")
        try:
            self._instance = self._factory()
        except Exception as e:
            logger.error(f"Initialization of {self._name} failed: {e}")
            raise

    def get(self) -> T:
        """Return the instance, creating it on first use."""
        self._once.do(self._create)
        return self._instance  # type: ignore[return-value]

    @property
    def state(self) -> OnceState:
        """State of the underlying init guard."""
        return self._once.state

    @property
    def initialized(self) -> bool:
        """True if the instance has been created."""
        return self._once.done and self._once.error is None

    @property
    def error(self) -> Optional[BaseException]:
        """Exception raised by the factory, or None."""
        return self._once.error


__all__ = ["Once", "OnceState", "LazyInstance"]
