"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fridge_insights.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from fridge_insights.adapters.openai_chat_client import OpenAIChatClient
from fridge_insights.adapters.supabase_chat_repository import SupabaseChatRepository
from fridge_insights.adapters.supabase_identity_client import SupabaseIdentityClient
from fridge_insights.adapters.supabase_item_repository import SupabaseItemRepository
from fridge_insights.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from fridge_insights.adapters.supabase_user_repository import SupabaseUserRepository
from fridge_insights.config import Settings
from fridge_insights.services.conversations import ConversationService
from fridge_insights.services.insights import InsightService
from fridge_insights.services.items import ItemService
from fridge_insights.services.products import ProductService
from fridge_insights.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    item_service: ItemService
    product_service: ProductService
    conversation_service: ConversationService
    insight_service: InsightService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    item_repository = SupabaseItemRepository(supabase_client)
    product_repository = SupabaseProductRepository(supabase_client)
    chat_repository = SupabaseChatRepository(supabase_client)

    user_service = UserService(
        repository=user_repository,
        identity_client=SupabaseIdentityClient(supabase_client),
    )
    item_service = ItemService(
        repository=item_repository,
        user_repository=user_repository,
        product_repository=product_repository,
    )
    catalog_client = HttpxOpenFoodFactsClient.create(
        resolved_settings.open_food_facts_base_url
    )
    product_service = ProductService(
        repository=product_repository,
        catalog_client=catalog_client,
    )
    conversation_service = ConversationService(chat_repository)
    llm_client = OpenAIChatClient.create(
        api_key=resolved_settings.openai_api_key,
        model=resolved_settings.openai_model,
        store=resolved_settings.openai_store,
    )
    insight_service = InsightService(
        item_service=item_service,
        conversation_service=conversation_service,
        llm_client=llm_client,
        recipe_temperature=resolved_settings.recipe_temperature,
        kpi_temperature=resolved_settings.kpi_temperature,
        chat_temperature=resolved_settings.chat_temperature,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
        timezone_name=resolved_settings.household_timezone,
    )

    async def close_resources() -> None:
        await catalog_client.close()
        await llm_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        item_service=item_service,
        product_service=product_service,
        conversation_service=conversation_service,
        insight_service=insight_service,
        close_resources=close_resources,
    )
