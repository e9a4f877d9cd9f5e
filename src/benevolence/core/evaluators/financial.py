"""Financial need evaluation from reported income, expenses and savings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import ApplicationForm


@dataclass
class FinancialConfig:
    """Expense categories, band limits and savings modifiers."""

    expense_fields: tuple[str, ...] = (
        "expense_rent",
        "expense_utilities",
        "expense_food",
        "expense_transportation",
        "expense_insurance",
        "expense_childcare",
        "expense_other",
    )
    insufficient_data_score: int = 5
    break_even_tolerance: float = 50.0
    no_savings_bonus: int = 1
    savings_cover_reduction: int = 2
    savings_cover_floor: int = 3
    modifier_min_score: int = 5


class FinancialEvaluator:
    """Score the gap between monthly income and expenses (0-10)."""

    method = "financial"
    max_score = 10

    def __init__(self, *, config: FinancialConfig | None = None) -> None:
        self._config = config or FinancialConfig()

    def evaluate(self, submission: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        form = ApplicationForm.model_validate(submission)

        savings = form.amount("liquid_savings")
        request_amount = form.amount("amount_requested")
        income = self.monthly_income(form)
        expenses = self.total_expenses(form)

        if income == 0 and expenses == 0:
            return self._build_response(
                score=self._config.insufficient_data_score,
                detail="Insufficient financial data provided; cannot fully assess from numbers alone",
                income=0.0,
                expenses=0.0,
                gap=0.0,
                gap_percent=None,
                savings=savings,
                request_amount=request_amount,
            )

        gap = income - expenses
        # multiply before dividing: 200 of 1000 must be exactly 20.0
        gap_percent = (gap * 100) / income if income > 0 else -100.0
        savings_covers_request = savings >= request_amount

        score, detail = self._band(gap, gap_percent, savings_covers_request)

        if savings <= 0 and score >= self._config.modifier_min_score:
            score = min(self.max_score, score + self._config.no_savings_bonus)
        if savings_covers_request and score >= self._config.modifier_min_score:
            score = max(self._config.savings_cover_floor, score - self._config.savings_cover_reduction)

        score = max(0, min(self.max_score, score))

        return self._build_response(
            score=score,
            detail=detail,
            income=income,
            expenses=expenses,
            gap=gap,
            gap_percent=gap_percent,
            savings=savings,
            request_amount=request_amount,
        )

    @staticmethod
    def monthly_income(form: ApplicationForm) -> float:
        """Stated total income when positive, otherwise net income."""
        total = form.amount("total_monthly_income")
        return total if total > 0 else form.amount("monthly_net_income")

    def total_expenses(self, form: ApplicationForm) -> float:
        return sum(form.amount(name) for name in self._config.expense_fields)

    def _band(self, gap: float, gap_percent: float, savings_covers_request: bool) -> tuple[int, str]:
        shortfall = abs(gap)
        percent = abs(gap_percent)
        tolerance = self._config.break_even_tolerance

        if gap > 0 and gap_percent > 20 and savings_covers_request:
            return 1, f"Income exceeds expenses by {gap_percent:.0f}%, savings cover request"
        if gap > 0 and gap_percent > 10:
            return 3, f"Income slightly exceeds expenses by {gap_percent:.0f}%"
        if gap > 0 and gap_percent > 0:
            return 5, f"Income barely exceeds expenses by {gap_percent:.0f}%"
        if -tolerance <= gap <= tolerance:
            return 7, f"Income roughly equal to expenses (gap: ${shortfall:.2f})"
        if gap < 0 and gap_percent >= -20:
            return 8, f"Expenses exceed income by ${shortfall:.2f}/mo ({percent:.0f}%)"
        if gap < 0 and gap_percent >= -40:
            return 9, f"Expenses significantly exceed income by ${shortfall:.2f}/mo ({percent:.0f}%)"
        return 10, f"Severe deficit: expenses exceed income by ${shortfall:.2f}/mo"

    def _build_response(
        self,
        *,
        score: int,
        detail: str,
        income: float,
        expenses: float,
        gap: float,
        gap_percent: float | None,
        savings: float,
        request_amount: float,
    ) -> dict[str, Any]:
        return {
            "method": self.method,
            "score": score,
            "detail": detail,
            "metadata": {
                "total_income": income,
                "total_expenses": expenses,
                "monthly_gap": gap,
                "gap_percent": gap_percent,
                "savings": savings,
                "request_amount": request_amount,
                "savings_covers_request": savings >= request_amount,
            },
        }
