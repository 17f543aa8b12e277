from __future__ import annotations

from datetime import date
from decimal import Decimal

from app.core.engine_config import EngineConfig
from app.core.logging import get_logger
from app.models import OptimizationInput, OptimizationResult

from .implementation_planner import ImplementationPlanner
from .loan_summary import LoanSummaryBuilder
from .projection_generator import ProjectionGenerator
from .pslf_eligibility import PSLFEligibilityChecker
from .pslf_projector import PSLFProjector
from .refinance_generator import RefinanceScenarioGenerator
from .savings_calculator import SavingsCalculator
from .strategy_recommender import StrategyRecommender
from .tax_estimator import TaxEstimator

logger = get_logger(__name__)


class OptimizationEngine:
    """Stateless pipeline from a loan portfolio to a ranked repayment recommendation.

    The engine holds only its immutable config, so one instance can serve every
    request. ``now`` is always supplied by the caller.
    """

    def __init__(self, config: EngineConfig) -> None:
        self.config = config
        self._summary_builder = LoanSummaryBuilder()
        self._eligibility_checker = PSLFEligibilityChecker()
        self._tax_estimator = TaxEstimator(config)
        self._pslf_projector = PSLFProjector(config, self._tax_estimator, self._eligibility_checker)
        self._refinance_generator = RefinanceScenarioGenerator(config)
        self._recommender = StrategyRecommender()
        self._savings_calculator = SavingsCalculator(config)
        self._projection_generator = ProjectionGenerator(config, self._pslf_projector)
        self._planner = ImplementationPlanner()

    def resolve_salary(self, request: OptimizationInput) -> Decimal:
        """Reported salary when the documents carry one (zero included), else the table estimate."""
        if request.employment.annual_salary is not None:
            return request.employment.annual_salary
        profile = request.profile
        return self.config.salary_for(profile.career_stage, profile.specialty_category)

    def optimize(self, request: OptimizationInput, now: date) -> OptimizationResult:
        summary = self._summary_builder.build(request.loans, request.extracted)
        salary = self.resolve_salary(request)

        eligibility = self._eligibility_checker.evaluate(request)
        pslf = self._pslf_projector.project(request, summary, salary, eligibility)
        refinancing = self._refinance_generator.generate(summary.total_balance, salary, request.profile)

        recommendation = self._recommender.recommend(pslf, refinancing)
        savings = self._savings_calculator.calculate(recommendation, summary)
        projections = self._projection_generator.generate(recommendation, salary, request.profile.career_stage)
        taxes = self._tax_estimator.build_summary(recommendation, now)
        steps = self._planner.plan(recommendation)

        logger.info(
            "Optimization complete: strategy=%s confidence=%s rule=%s balance=%s",
            recommendation.recommended_strategy.value,
            recommendation.confidence.value,
            recommendation.rule,
            summary.total_balance,
        )
        return OptimizationResult(
            as_of=now,
            profile=request.profile,
            loan_summary=summary,
            pslf_eligibility=eligibility,
            pslf_analysis=pslf,
            refinancing_analysis=refinancing,
            recommendation=recommendation,
            savings=savings,
            detailed_projections=projections,
            tax_implications=taxes,
            implementation_steps=steps,
        )
