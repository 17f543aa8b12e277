from __future__ import annotations

from typing import Iterable

from app.models import (
    CareerGoal,
    EmployerType,
    OptimizationInput,
    PSLFEligibility,
    RuleEvaluation,
)

QUALIFYING_EMPLOYERS = frozenset(
    {EmployerType.NONPROFIT_501C3, EmployerType.GOVERNMENT, EmployerType.ACADEMIC}
)
PUBLIC_SERVICE_GOALS = frozenset(
    {CareerGoal.PUBLIC_SERVICE, CareerGoal.ACADEMIC_MEDICINE, CareerGoal.GOVERNMENT}
)


class PSLFEligibilityChecker:
    def evaluate(self, request: OptimizationInput) -> PSLFEligibility:
        return PSLFEligibility(rule_results=tuple(self._evaluate_rules(request)))

    def _evaluate_rules(self, request: OptimizationInput) -> Iterable[RuleEvaluation]:
        employment = request.employment
        employer_type = employment.employer_type
        if employer_type in QUALIFYING_EMPLOYERS:
            yield RuleEvaluation(
                rule="qualifying_employer",
                passed=True,
                detail=f"employer type {employer_type.value} qualifies for PSLF",
            )
        elif employer_type is EmployerType.UNKNOWN and employment.pslf_eligible:
            yield RuleEvaluation(
                rule="qualifying_employer",
                passed=True,
                detail="employer confirmed PSLF-qualifying by servicer documents",
            )
        else:
            yield RuleEvaluation(
                rule="qualifying_employer",
                passed=False,
                detail=f"employer type {employer_type.value} does not qualify for PSLF",
            )

        if request.has_direct_loan:
            direct_count = sum(1 for loan in request.federal_loans if loan.is_direct)
            yield RuleEvaluation(
                rule="direct_federal_loan",
                passed=True,
                detail=f"{direct_count} Direct federal loan(s) on file",
            )
        else:
            yield RuleEvaluation(
                rule="direct_federal_loan",
                passed=False,
                detail="no Direct federal loans; consolidation required before payments qualify",
            )

        goals = request.profile.career_goals
        aligned = goals in PUBLIC_SERVICE_GOALS
        yield RuleEvaluation(
            rule="public_service_career",
            passed=aligned,
            detail=(
                f"career goal {goals.value} aligns with public service"
                if aligned
                else f"career goal {goals.value} does not align with public service"
            ),
        )
