"""Inventory and product lookup endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request

from fridge_insights.api.models import (
    AddItemRequest,
    ProductLookupRequest,
    UpdateItemRequest,
    serialize_items,
    serialize_product,
)

if TYPE_CHECKING:
    from fridge_insights.containers import AppContainer

router = APIRouter(tags=["items"])


@router.get("/users/{user_id}/items")
async def list_items(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's refrigerated items."""
    container: AppContainer = request.app.state.container
    return serialize_items(container.item_service.get_items(user_id))


@router.post("/users/{user_id}/items")
async def add_item(
    user_id: UUID, payload: AddItemRequest, request: Request
) -> dict[str, object]:
    """Add an item and return the updated list."""
    container: AppContainer = request.app.state.container
    items = container.item_service.add_item(
        user_id, payload.item_fields(), manual_entry=payload.manual_entry
    )
    return serialize_items(items)


@router.patch("/users/{user_id}/items/{item_id}")
async def update_item(
    user_id: UUID, item_id: UUID, payload: UpdateItemRequest, request: Request
) -> dict[str, object]:
    """Merge supplied fields into an item and return the updated list."""
    container: AppContainer = request.app.state.container
    items = container.item_service.update_item(
        user_id, item_id, payload.item_fields()
    )
    return serialize_items(items)


@router.delete("/users/{user_id}/items/{item_id}")
async def remove_item(
    user_id: UUID, item_id: UUID, request: Request
) -> dict[str, object]:
    """Remove an item and return the updated list."""
    container: AppContainer = request.app.state.container
    return serialize_items(container.item_service.remove_item(user_id, item_id))


@router.post("/products/lookup")
async def lookup_product(
    payload: ProductLookupRequest, request: Request
) -> dict[str, object]:
    """Resolve a scanned barcode to product details."""
    container: AppContainer = request.app.state.container
    product = await container.product_service.lookup(payload.code)
    return {"productFound": True, "product": serialize_product(product)}
