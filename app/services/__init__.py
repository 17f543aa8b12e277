from .config_loader import EngineConfigLoader
from .implementation_planner import ImplementationPlanner
from .loan_summary import LoanSummaryBuilder
from .optimization_engine import OptimizationEngine
from .projection_generator import ProjectionGenerator
from .pslf_eligibility import PSLFEligibilityChecker
from .pslf_projector import PSLFProjector
from .refinance_generator import RefinanceScenarioGenerator
from .savings_calculator import SavingsCalculator
from .strategy_recommender import StrategyRecommender
from .tax_estimator import TaxEstimator

__all__ = [
    "EngineConfigLoader",
    "ImplementationPlanner",
    "LoanSummaryBuilder",
    "OptimizationEngine",
    "PSLFEligibilityChecker",
    "PSLFProjector",
    "ProjectionGenerator",
    "RefinanceScenarioGenerator",
    "SavingsCalculator",
    "StrategyRecommender",
    "TaxEstimator",
]
