"""Ambient principal tracking for the in-process host.

The acting principal is kept in a context variable so every request (or
asyncio task) sees its own authority. Both helpers are scoped: the previous
authority is restored when the block exits, including on exceptions.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Union

from invitations.domain.model import User


class _System:
    """Marker for system authority."""

    def __repr__(self) -> str:
        return "<system>"


SYSTEM = _System()

Authority = Union[User, _System, None]


class SecurityContext:
    """Holds the authority calls are currently evaluated with."""

    def __init__(self) -> None:
        self._authority: ContextVar[Authority] = ContextVar(
            "invitations_authority", default=None
        )

    @property
    def current(self) -> Authority:
        return self._authority.get()

    @property
    def is_system(self) -> bool:
        return self._authority.get() is SYSTEM

    @property
    def current_user(self) -> Optional[User]:
        authority = self._authority.get()
        return authority if isinstance(authority, User) else None

    @contextmanager
    def acting_as(self, user: Optional[User]) -> Iterator[None]:
        reset_token = self._authority.set(user)
        try:
            yield
        finally:
            self._authority.reset(reset_token)

    @contextmanager
    def run_as_system(self) -> Iterator[None]:
        reset_token = self._authority.set(SYSTEM)
        try:
            yield
        finally:
            self._authority.reset(reset_token)
