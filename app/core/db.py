from fastapi import Request

from app.core.config import Settings
from app.services.customer_service import CustomerRegistry
from app.services.customer_store import JsonCustomerStore


def init_registry(settings: Settings) -> CustomerRegistry:
    registry = CustomerRegistry(JsonCustomerStore(settings.CUSTOMERS_FILE))
    registry.load()
    return registry


def get_registry(request: Request) -> CustomerRegistry:
    return request.app.state.registry
