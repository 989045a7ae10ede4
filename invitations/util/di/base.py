"""Provider metadata shared by the container builders."""

from typing import ClassVar, Literal

from dishka import Provider

# Providers that tests may swap for in-memory variants
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider carrying the flags used to pick an implementation.

    A base provider that sets ``__mock_component__`` is abstract: the
    production container picks its non-mock subclass, the test container
    picks the subclass with ``__is_mock__ = True`` unless the component is
    unmocked.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
