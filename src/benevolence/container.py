"""Dependency injection container for the intake service."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    AlternativesEvaluator,
    CompletenessEvaluator,
    CrisisEvaluator,
    FinancialEvaluator,
    RecommendationConfig,
    Recommender,
    ScoringEngine,
)
from .core.evaluators import AlternativesConfig, CompletenessConfig, CrisisConfig, FinancialConfig
from .notifications import NotificationConfig, NotificationEmailBuilder
from .pipeline import ApplicationProcessor
from .records import ApplicationRecordBuilder


class IntakeContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    completeness_evaluator = providers.Singleton(CompletenessEvaluator)
    financial_evaluator = providers.Singleton(FinancialEvaluator)
    crisis_evaluator = providers.Singleton(CrisisEvaluator)
    alternatives_evaluator = providers.Singleton(AlternativesEvaluator)
    recommender = providers.Singleton(Recommender)

    scoring_engine = providers.Singleton(
        ScoringEngine,
        completeness=completeness_evaluator,
        financial=financial_evaluator,
        crisis=crisis_evaluator,
        alternatives=alternatives_evaluator,
        recommender=recommender,
    )

    record_builder = providers.Singleton(ApplicationRecordBuilder)
    email_builder = providers.Singleton(NotificationEmailBuilder)

    # repository and notifier are supplied per call
    processor = providers.Factory(
        ApplicationProcessor,
        engine=scoring_engine,
        record_builder=record_builder,
        email_builder=email_builder,
    )


def create_container(*, settings: dict | None = None) -> IntakeContainer:
    """Instantiate container with optional overrides."""

    container = IntakeContainer()

    if not settings or not isinstance(settings, dict):
        return container

    if settings.get("recommendation"):
        recommendation_config = RecommendationConfig(**settings["recommendation"])
        container.recommender.override(
            providers.Singleton(Recommender, config=recommendation_config)
        )

    if settings.get("notification"):
        notification_config = NotificationConfig(**settings["notification"])
        container.email_builder.override(
            providers.Singleton(NotificationEmailBuilder, config=notification_config)
        )

    evaluator_settings = settings.get("evaluators", {})

    if "completeness" in evaluator_settings:
        completeness_config = CompletenessConfig(**evaluator_settings["completeness"])
        container.completeness_evaluator.override(
            providers.Singleton(CompletenessEvaluator, config=completeness_config)
        )

    if "financial" in evaluator_settings:
        financial_config = FinancialConfig(**evaluator_settings["financial"])
        container.financial_evaluator.override(
            providers.Singleton(FinancialEvaluator, config=financial_config)
        )

    if "crisis" in evaluator_settings:
        crisis_config = CrisisConfig(**evaluator_settings["crisis"])
        container.crisis_evaluator.override(
            providers.Singleton(CrisisEvaluator, config=crisis_config)
        )

    if "alternatives" in evaluator_settings:
        alternatives_config = AlternativesConfig(**evaluator_settings["alternatives"])
        container.alternatives_evaluator.override(
            providers.Singleton(AlternativesEvaluator, config=alternatives_config)
        )

    return container
