"""Deterministic prompt rendering for recipes, KPIs and chat.

Every function here is pure: the same inventory snapshot always renders the
same text, which keeps the language model a black box we can reason about.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from fridge_insights.domain.conversations import Message
from fridge_insights.domain.items import RefrigeratedItem

KPI_KEYS = (
    "totalWastedValue",
    "totalFridgeValue",
    "potentialSavings",
    "recommendedGroceryBudget",
    "environmentalImpact",
)

RECIPE_COUNT = 3

_UNKNOWN_PRICE = "Unknown Price"


def sort_by_expiration(items: Sequence[RefrigeratedItem]) -> list[RefrigeratedItem]:
    """Order items soonest-expiring first.

    Items without a usable date go last, keeping their original order.
    """
    return sorted(
        items,
        key=lambda item: (item.expiration_day is None, item.expiration_day or date.max),
    )


def partition_by_expiry(
    items: Sequence[RefrigeratedItem], today: date
) -> tuple[list[RefrigeratedItem], list[RefrigeratedItem]]:
    """Split items into (expired, not expired) by calendar date.

    An item is expired only when its date is strictly before ``today``.
    Items without a usable date count as not expired.
    """
    expired: list[RefrigeratedItem] = []
    fresh: list[RefrigeratedItem] = []
    for item in items:
        day = item.expiration_day
        if day is not None and day < today:
            expired.append(item)
        else:
            fresh.append(item)
    return expired, fresh


def build_recipe_prompt(items: Sequence[RefrigeratedItem]) -> str:
    """Render the recipe suggestion request."""
    lines = [
        "You are a practical home cook helping a household use up their fridge.",
        "These are the items in the fridge, soonest-expiring first:",
    ]
    lines.extend(f"- {_describe_item(item)}" for item in sort_by_expiration(items))
    lines.extend(
        [
            "",
            f"Suggest exactly {RECIPE_COUNT} recipes. Each recipe must prioritize "
            "the items that expire soonest.",
            f"Respond with a JSON array of exactly {RECIPE_COUNT} objects. Each object "
            'has the keys "title" (string), "ingredients" (array of strings) and '
            '"instructions" (array of strings, one step per entry).',
            "Return only the JSON block. Do not write any prose before or after it.",
        ]
    )
    return "\n".join(lines)


def build_kpi_prompt(items: Sequence[RefrigeratedItem], today: date) -> str:
    """Render the consumption and waste estimation request."""
    expired, fresh = partition_by_expiry(items, today)
    keys = ", ".join(KPI_KEYS)
    lines = [
        "You are a household food-waste analyst.",
        f"Today is {today.isoformat()}.",
        "",
        "Expired items:",
        *_price_lines(expired),
        "",
        "Items that have not expired:",
        *_price_lines(fresh),
        "",
        "Estimate the household's food metrics from these items.",
        f"Respond with a JSON object containing exactly these keys: {keys}.",
        "Every value must be a string that includes its unit, for example "
        '"$12.50" or "3.2 kg CO2e".',
        "Respond with JSON only. Do not include any other text.",
    ]
    return "\n".join(lines)


def build_chat_context(items: Sequence[RefrigeratedItem]) -> str:
    """Render the system-context message that precedes a chat turn."""
    lines = ["You are a kitchen assistant for a single household."]
    if items:
        lines.append("The fridge currently contains:")
        lines.extend(f"- {_describe_item(item, detailed=True)}" for item in items)
    else:
        lines.append("The fridge is currently empty.")
    lines.append(
        "Answer definitively and concisely. When the user asks what to do, "
        "pick one answer and commit to it instead of listing options."
    )
    return "\n".join(lines)


def build_chat_messages(
    context: Message, history: Sequence[Message], user_message: Message
) -> list[dict[str, str]]:
    """Assemble the message sequence sent to the model for a chat turn."""
    return [
        context.as_prompt(),
        *(message.as_prompt() for message in history),
        user_message.as_prompt(),
    ]


def _describe_item(item: RefrigeratedItem, detailed: bool = False) -> str:
    quantity = item.quantity if item.quantity not in (None, "") else "quantity unknown"
    text = f"{item.name} ({quantity})"
    if detailed:
        extras = [value for value in (item.brand, item.category) if value]
        if extras:
            text = f"{text} [{', '.join(extras)}]"
    return f"{text}, {_describe_expiration(item)}"


def _describe_expiration(item: RefrigeratedItem) -> str:
    day = item.expiration_day
    if day is None:
        return "expiration date unknown"
    return f"expires {day.isoformat()}"


def _price_lines(items: Sequence[RefrigeratedItem]) -> list[str]:
    if not items:
        return ["- None"]
    return [
        f"- {_describe_item(item)}, price {_format_price(item.price)}"
        for item in items
    ]


def _format_price(price: Decimal | None) -> str:
    if price is None:
        return _UNKNOWN_PRICE
    return f"${price:.2f}"
