from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from locallibrary.core import container
from locallibrary.database import SessionFactory

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[SessionFactory], T]:
    """
    Create a FastAPI dependency for a container provider.

    Overrides container.session_factory with the application session factory
    while the use case graph is built. Repositories open their own sessions
    from it per operation.
    """

    def dependency(session_factory: SessionFactory) -> T:
        try:
            container.session_factory.override(session_factory)
            return provider()
        finally:
            # Reset override once the graph is built
            container.session_factory.reset_override()

    return dependency
