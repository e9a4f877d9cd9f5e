"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError


class RecommendationSettings(BaseModel):
    mid_offset: int | None = None
    high_offset: int | None = None
    max_auto_points: int | None = None


class EvaluatorConfig(BaseModel):
    completeness: dict[str, Any] | None = None
    financial: dict[str, Any] | None = None
    crisis: dict[str, Any] | None = None
    alternatives: dict[str, Any] | None = None


class NotificationSettings(BaseModel):
    review_base_url: str | None = None
    sender: str | None = None
    recipients: list[str] | None = None


class AppConfig(BaseModel):
    recommendation: RecommendationSettings = Field(default_factory=RecommendationSettings)
    evaluators: EvaluatorConfig = Field(default_factory=EvaluatorConfig)
    notification: NotificationSettings = Field(default_factory=NotificationSettings)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        recommendation = self.recommendation.model_dump(exclude_none=True)
        if recommendation:
            settings["recommendation"] = recommendation
        evaluator_settings = self.evaluators.model_dump(exclude_none=True)
        if evaluator_settings:
            settings["evaluators"] = evaluator_settings
        notification = self.notification.model_dump(exclude_none=True)
        if notification:
            settings["notification"] = notification
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
