import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from learnflow.core import container
from learnflow.database import DatabaseSession

T = TypeVar("T")

# The container is shared by all requests; sync dependencies run in a threadpool
_override_lock = threading.Lock()


def inject_service(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    The container's ``db`` is overridden with the request-scoped session while
    the service graph is built. Builds are serialized so a service never sees
    another request's session.
    """

    def dependency(db: DatabaseSession) -> T:
        with _override_lock:
            container.db.override(db)
            try:
                return provider()
            finally:
                container.db.reset_override()

    return dependency
