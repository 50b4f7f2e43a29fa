"""FastAPI dependency injection providers.

Centralizes dependency creation for API routes via ``Depends()``.

Clean Architecture Notes:
- Only imports from application and core layers (never infrastructure directly)
- Override ``get_contract`` in tests through ``app.dependency_overrides``
"""

from __future__ import annotations

import os
import threading
from functools import lru_cache

from todolist.application.contract import TodoContract
from todolist.application.factory import TodoFactory


@lru_cache(maxsize=1)
def get_factory() -> TodoFactory:
    """Provide a shared TodoFactory instance."""
    return TodoFactory()


@lru_cache(maxsize=1)
def get_contract() -> TodoContract:
    """Provide the shared TodoContract for this process.

    Profile and work dir come from ``TODOLIST_PROFILE`` (default ``server``)
    and ``TODOLIST_WORK_DIR``. Use ``get_contract.cache_clear()`` to rebuild.
    """
    profile = os.getenv("TODOLIST_PROFILE", "server")
    work_dir = os.getenv("TODOLIST_WORK_DIR")
    return get_factory().create_contract(profile=profile, work_dir=work_dir)


@lru_cache(maxsize=1)
def get_contract_lock() -> threading.Lock:
    """Lock serializing every call on the shared contract."""
    return threading.Lock()
