# app/api/routes_customers.py
from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from typing import List
import logging

from app.core.db import get_registry
from app.core.errors import CustomerServiceError, InputReadError, MalformedInput
from app.models.domain_models import Customer
from app.schemas.customer_schemas import CustomerBatch
from app.services.customer_service import CustomerRegistry

router = APIRouter(prefix="/customer", tags=["customers"])

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Customers added successfully."


@router.get("", response_model=List[Customer])
def list_customers(registry: CustomerRegistry = Depends(get_registry)):
    logger.info("Customer request received: GET")
    logger.info("Returning all customers.")
    return registry.list_customers()


@router.post("", response_class=PlainTextResponse)
async def add_customers(request: Request, registry: CustomerRegistry = Depends(get_registry)):
    """
    Append a JSON array of customers. The body is read and parsed by hand
    so that every failure maps onto its own plain-text 400 message.
    """
    logger.info("Customer request received: POST")

    try:
        body = await request.body()
    except Exception as e:
        logger.error("Error reading request body: %s", e)
        raise InputReadError() from e

    # an empty body deserialises to "no customers", not a parse error
    try:
        batch = CustomerBatch.validate_json(body) if body.strip() else None
    except ValidationError as e:
        logger.error("Error deserializing request body: %s", e)
        raise MalformedInput() from e

    try:
        # blocking: takes the registry lock and writes the snapshot
        await run_in_threadpool(registry.add_customers, batch)
    except CustomerServiceError as e:
        logger.warning("Customers rejected: %s", e.message)
        raise
    except Exception:
        logger.exception("Error processing customers")
        return Response(status_code=500)

    logger.info(SUCCESS_MESSAGE)
    return PlainTextResponse(SUCCESS_MESSAGE)


@router.api_route("", methods=["PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"], include_in_schema=False)
def other_methods(request: Request):
    logger.info("Customer request received: %s", request.method)
    return Response(status_code=200)
