from __future__ import annotations

import math
from decimal import Decimal

from app.core.engine_config import EngineConfig
from app.models import (
    CareerStage,
    Milestone,
    ProjectionSchedule,
    PSLFScenario,
    Recommendation,
    RefinanceScenario,
    StrategyType,
    YearlyProjectionRow,
)

from .amortization import MONTHS_PER_YEAR
from .pslf_projector import PSLFProjector, salary_in_year


class ProjectionGenerator:
    def __init__(self, config: EngineConfig, pslf_projector: PSLFProjector) -> None:
        self._config = config
        self._pslf_projector = pslf_projector

    def generate(self, recommendation: Recommendation, salary: Decimal, stage: CareerStage) -> ProjectionSchedule:
        chosen = recommendation.chosen
        growth = self._config.growth_rate_for(stage)
        if isinstance(chosen, PSLFScenario):
            return self._pslf_schedule(chosen, salary, growth)
        if isinstance(chosen, RefinanceScenario):
            return self._refinance_schedule(chosen, salary, growth)
        raise TypeError(f"unsupported scenario {type(chosen).__name__}")

    def _pslf_schedule(self, scenario: PSLFScenario, salary: Decimal, growth: Decimal) -> ProjectionSchedule:
        duration = math.ceil(scenario.years_remaining)
        rows = []
        for year in range(1, duration + 1):
            year_salary = salary_in_year(salary, growth, year - 1)
            monthly = self._pslf_projector.idr_monthly_payment(year_salary)
            rows.append(
                YearlyProjectionRow(
                    year=year,
                    salary=year_salary,
                    monthly_payment=monthly,
                    annual_payment=monthly * MONTHS_PER_YEAR,
                    payments_remaining=max(0, scenario.payments_remaining - year * MONTHS_PER_YEAR),
                )
            )

        last_year = max(1, duration)
        milestones = (
            Milestone(year=1, event="Submit Employment Certification Form", action="required"),
            Milestone(year=max(1, math.ceil(duration / 2)), event="Mid-point PSLF progress check-in", action="recommended"),
            Milestone(year=last_year, event="PSLF application due after 120th qualifying payment", action="required"),
        )
        return ProjectionSchedule(strategy=StrategyType.PSLF, rows=tuple(rows), milestones=milestones)

    def _refinance_schedule(
        self, scenario: RefinanceScenario, salary: Decimal, growth: Decimal
    ) -> ProjectionSchedule:
        term = scenario.term_years
        rows = tuple(
            YearlyProjectionRow(
                year=year,
                salary=salary_in_year(salary, growth, year - 1),
                monthly_payment=scenario.monthly_payment,
                annual_payment=scenario.monthly_payment * MONTHS_PER_YEAR,
                remaining_term_years=term - year,
            )
            for year in range(1, term + 1)
        )
        milestones = (
            Milestone(year=1, event="First year review of the refinanced loan", action="recommended"),
            Milestone(year=max(1, math.ceil(term / 2)), event="Consider refinancing again if rates drop", action="optional"),
            Milestone(year=term, event="Loans paid off", action="celebration"),
        )
        return ProjectionSchedule(strategy=StrategyType.REFINANCE, rows=rows, milestones=milestones)
