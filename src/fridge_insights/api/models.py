"""Pydantic request models and response serializers for the HTTP API."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from fridge_insights.domain.conversations import Message
from fridge_insights.domain.items import RefrigeratedItem
from fridge_insights.domain.models import Product

ItemValue = int | float | str | None


class SignupRequest(BaseModel):
    """Signup payload; field rules are enforced by the user service."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = Field(default=None, alias="confirmPassword")


class LoginRequest(BaseModel):
    """Login payload carrying an identity token."""

    token: str | None = None


class ProductLookupRequest(BaseModel):
    """Barcode lookup payload."""

    code: str | None = Field(
        default=None, validation_alias=AliasChoices("code", "qrCode")
    )


class ItemFields(BaseModel):
    """Item fields accepted from clients."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    code: str | None = None
    name: str | None = None
    brand: str | None = None
    category: str | None = None
    quantity: ItemValue = None
    expiration_date: str | None = Field(default=None, alias="expirationDate")
    price: float | str | None = None


class AddItemRequest(ItemFields):
    """Payload for adding an item."""

    manual_entry: bool = Field(default=False, alias="manualEntry")

    def item_fields(self) -> dict[str, object]:
        return self.model_dump(exclude={"manual_entry"})


class UpdateItemRequest(ItemFields):
    """Partial item update; only fields present in the body are applied."""

    def item_fields(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)


class ChatRequest(BaseModel):
    """A single user chat message."""

    message: str | None = None


def serialize_item(item: RefrigeratedItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "code": item.code,
        "name": item.name,
        "brand": item.brand,
        "category": item.category,
        "quantity": item.quantity,
        "expirationDate": item.expiration_date,
        "price": str(item.price) if item.price is not None else None,
    }


def serialize_items(items: list[RefrigeratedItem]) -> dict[str, object]:
    return {"items": [serialize_item(item) for item in items]}


def serialize_product(product: Product) -> dict[str, object]:
    return {
        "code": product.code,
        "name": product.name,
        "brand": product.brand,
        "category": product.category,
    }


def serialize_message(message: Message) -> dict[str, object]:
    return {
        "role": message.role,
        "content": message.content,
        "timestamp": message.timestamp.isoformat(),
    }
