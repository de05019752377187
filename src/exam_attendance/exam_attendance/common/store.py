from __future__ import annotations

import logging
from typing import Callable, TypeVar

from ..core.exceptions import DomainError, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def store_call(action: str, fn: Callable[..., T], *args, **kwargs) -> T:
    """Run one roster store call; any non-domain failure surfaces as StoreError."""
    try:
        return fn(*args, **kwargs)
    except DomainError:
        raise
    except Exception as e:
        logger.exception("Roster store call failed: %s", action)
        raise StoreError(f"Failed to {action}") from e
