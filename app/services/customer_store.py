from pathlib import Path
import json
import logging
from typing import List

from pydantic import ValidationError

from app.core.errors import PersistenceError
from app.models.domain_models import Customer
from app.schemas.customer_schemas import CustomerBatch, dump_customers

logger = logging.getLogger(__name__)


class JsonCustomerStore:
    """
    Snapshot of the customer collection as a single JSON array on disk.
    Every save overwrites the whole file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[Customer]:
        if not self.path.exists():
            logger.warning("Customer file %s not found, starting empty", self.path)
            return []

        try:
            raw = self.path.read_bytes()
            customers = CustomerBatch.validate_json(raw)
        except (OSError, ValidationError) as e:
            logger.warning("Error loading customers from file %s: %s", self.path, e)
            return []

        return customers or []

    def save(self, customers: List[Customer]) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(dump_customers(customers), f, indent=2)
        except OSError as e:
            raise PersistenceError(f"Error saving customers to file {self.path}: {e}") from e
