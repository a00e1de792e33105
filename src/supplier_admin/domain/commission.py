"""Commission configuration attached to a supplier."""

from __future__ import annotations

from enum import Enum

from pydantic import Field, model_validator

from .value_object import ValueObject

DEFAULT_TIER_SPAN = 50000.0
DEFAULT_TIER_RATE = 3.0


class CommissionType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"
    TIERED = "tiered"
    PERFORMANCE_BASED = "performance_based"


class CommissionTier(ValueObject):
    """Rate applied to order amounts within ``[min_amount, max_amount]``."""

    min_amount: float = Field(ge=0)
    max_amount: float = Field(ge=0)
    rate: float = Field(ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> CommissionTier:
        if self.min_amount > self.max_amount:
            raise ValueError("min_amount must not exceed max_amount")
        return self

    def contains(self, amount: float) -> bool:
        return self.min_amount <= amount <= self.max_amount


class PerformanceMetrics(ValueObject):
    """Thresholds and rates for performance-based commission.

    ``quality_threshold`` is a percentage (0-100) and
    ``delivery_time_threshold`` is expressed in days.
    """

    quality_threshold: float = Field(default=95.0, ge=0, le=100)
    delivery_time_threshold: float = Field(default=14.0, ge=0)
    base_rate: float = Field(default=3.0, ge=0)
    bonus_rate: float = Field(default=2.0, ge=0)

    def thresholds_met(self, quality_score: float, delivery_days: float) -> bool:
        return (
            quality_score >= self.quality_threshold
            and delivery_days <= self.delivery_time_threshold
        )


class Commission(ValueObject):
    """Commission settings for one supplier.

    Rates are percentages, except for :attr:`CommissionType.FIXED` where
    ``rate`` is a flat amount in the account currency.
    """

    type: CommissionType = CommissionType.PERCENTAGE
    rate: float = Field(default=0.0, ge=0)
    notes: str = ""
    performance_metrics: PerformanceMetrics | None = None
    tiers: list[CommissionTier] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_type_requirements(self) -> Commission:
        if self.type is CommissionType.TIERED:
            if not self.tiers:
                raise ValueError("tiered commission requires at least one tier")
            for lower, upper in zip(self.tiers, self.tiers[1:]):
                if upper.min_amount <= lower.max_amount:
                    raise ValueError(
                        "commission tiers must be sorted and must not overlap"
                    )
        if (
            self.type is CommissionType.PERFORMANCE_BASED
            and self.performance_metrics is None
        ):
            raise ValueError(
                "performance-based commission requires performance_metrics"
            )
        return self

    def calculate(
        self,
        amount: float,
        quality_score: float | None = None,
        delivery_days: float | None = None,
    ) -> float:
        """Commission owed on *amount* under these settings."""
        if self.type is CommissionType.FIXED:
            return round(self.rate, 2)
        if self.type is CommissionType.TIERED:
            return round(amount * self._tier_for(amount).rate / 100, 2)
        if self.type is CommissionType.PERFORMANCE_BASED:
            metrics = self.performance_metrics or PerformanceMetrics()
            rate = metrics.base_rate
            if (
                quality_score is not None
                and delivery_days is not None
                and metrics.thresholds_met(quality_score, delivery_days)
            ):
                rate += metrics.bonus_rate
            return round(amount * rate / 100, 2)
        return round(amount * self.rate / 100, 2)

    def _tier_for(self, amount: float) -> CommissionTier:
        for tier in self.tiers:
            if tier.contains(amount):
                return tier
        if amount > self.tiers[-1].max_amount:
            return self.tiers[-1]
        # Falls in a gap between tiers or below the first one.
        below = [tier for tier in self.tiers if tier.max_amount < amount]
        return below[-1] if below else self.tiers[0]


def suggest_next_tier(tiers: list[CommissionTier]) -> CommissionTier:
    """Propose the tier that follows *tiers* when a user adds a new one."""
    if not tiers:
        return CommissionTier(
            min_amount=0, max_amount=DEFAULT_TIER_SPAN, rate=DEFAULT_TIER_RATE
        )
    last = tiers[-1]
    return CommissionTier(
        min_amount=last.max_amount + 1,
        max_amount=last.max_amount + DEFAULT_TIER_SPAN,
        rate=last.rate + 1,
    )
