# core/exceptions.py
from __future__ import annotations

from typing import Optional


class CustomerError(Exception):
    """Base class for data access failures."""


class CustomerNotFound(CustomerError):
    """No customer row matches the requested id."""

    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"customer not found: {customer_id}")


class CustomerStoreError(CustomerError):
    """
    Any other store failure (connectivity, constraint, query).
    원본 예외는 __cause__ 로만 보관하고 클라이언트에는 노출하지 않는다.
    """

    def __init__(self, operation: str, customer_id: Optional[int] = None):
        self.operation = operation
        self.customer_id = customer_id
        msg = f"store failure during {operation}"
        if customer_id is not None:
            msg += f" (id={customer_id})"
        super().__init__(msg)
