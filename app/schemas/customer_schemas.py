# app/schemas/customer_schemas.py
from typing import List, Optional
from pydantic import TypeAdapter

from app.models.domain_models import Customer

# Both the POST body and the snapshot file are a JSON array of customers;
# a literal `null` is accepted and treated as "no customers".
CustomerBatch = TypeAdapter(Optional[List[Customer]])


def dump_customers(customers: List[Customer]) -> list:
    return [c.model_dump(by_alias=True) for c in customers]
