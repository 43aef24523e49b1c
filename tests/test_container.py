"""Tests for container wiring."""

import asyncio

from fridge_insights.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.insight_service is not None
    assert container.insight_service.timezone_name == settings.household_timezone
    asyncio.run(container.close_resources())
