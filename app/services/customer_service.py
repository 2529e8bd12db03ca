# app/services/customer_service.py
import logging
import threading
from typing import Iterable, List, Optional, Set

from app.core.errors import EmptyInput, PersistenceError, ValidationFailed
from app.models.domain_models import Customer
from app.services.customer_store import JsonCustomerStore

logger = logging.getLogger(__name__)

MIN_AGE = 18


def validate_customer(cust: Customer, existing_ids: Set[int]) -> Optional[str]:
    """
    Check a single record. Returns the first failing rule's message,
    or None when the record is acceptable.
    """
    if not (cust.first_name or "").strip() or not (cust.last_name or "").strip():
        return f"Customer ID {cust.id}: First name and last name cannot be empty."

    if cust.age <= 0:
        return f"Customer ID {cust.id}: Age must be a positive number."

    if cust.age <= MIN_AGE:
        return f"Customer ID {cust.id}: Age must be over 18."

    if cust.id <= 0:
        return f"Customer ID {cust.id}: ID must be a positive number."

    if cust.id in existing_ids:
        return f"Customer ID {cust.id} already exists."

    return None


def insert_sorted(customers: List[Customer], cust: Customer) -> int:
    """
    Insert before the first record whose key sorts strictly after the new one,
    so equal keys stay in arrival order. Returns the insert position.
    """
    key = cust.sort_key()
    index = next(
        (i for i, existing in enumerate(customers) if key < existing.sort_key()),
        len(customers),
    )
    customers.insert(index, cust)
    return index


class CustomerRegistry:
    """
    In-memory, ordered customer collection backed by a JSON snapshot.

    One instance is created per application and shared by all requests;
    the lock serialises read-modify-write of the list and the file.
    """

    def __init__(self, store: JsonCustomerStore):
        self.store = store
        self._customers: List[Customer] = []
        self._lock = threading.Lock()

    def load(self) -> None:
        customers = self.store.load()
        with self._lock:
            self._customers = customers
        logger.info("Loaded %d customers from %s", len(customers), self.store.path)

    def list_customers(self) -> List[Customer]:
        with self._lock:
            return list(self._customers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)

    def add_customers(self, batch: Optional[Iterable[Customer]]) -> List[Customer]:
        """
        Validate a whole batch, then insert and persist it.

        Ids accepted earlier in the batch count as taken for later records.
        Nothing is inserted unless every record passes; in that case
        ValidationFailed carries one message per rejected record.
        """
        batch = list(batch or [])
        if not batch:
            raise EmptyInput()

        with self._lock:
            existing_ids = {c.id for c in self._customers}
            errors: List[str] = []
            accepted: List[Customer] = []

            for cust in batch:
                error = validate_customer(cust, existing_ids)
                if error:
                    errors.append(error)
                    continue
                accepted.append(cust)
                existing_ids.add(cust.id)

            if errors:
                raise ValidationFailed(errors)

            for cust in accepted:
                insert_sorted(self._customers, cust)

            try:
                self.store.save(self._customers)
            except PersistenceError as e:
                # memory stays authoritative for this process
                logger.error("%s", e)

        return accepted
