"""Models for structured language-model output."""

from pydantic import BaseModel, ConfigDict, Field


class Recipe(BaseModel):
    """Single recipe suggestion."""

    title: str = Field(min_length=1)
    ingredients: list[str]
    instructions: list[str]


class KpiReport(BaseModel):
    """Consumption and waste estimates for a fridge snapshot."""

    model_config = ConfigDict(extra="forbid")

    totalWastedValue: str  # noqa: N815
    totalFridgeValue: str  # noqa: N815
    potentialSavings: str  # noqa: N815
    recommendedGroceryBudget: str  # noqa: N815
    environmentalImpact: str  # noqa: N815
