from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, Self

from app.core.errors import ConfigurationError
from app.models.common import CareerStage, SpecialtyCategory

CONFIG_VERSION = "2025.1"


@dataclass(frozen=True)
class ApprovalTier:
    name: str
    min_salary: Decimal
    max_balance_to_salary: Decimal
    approval_odds: int


@dataclass(frozen=True)
class TaxBracket:
    min_salary: Decimal
    marginal_rate: Decimal


def _flat_row(amount: str) -> dict[SpecialtyCategory, Decimal]:
    return {category: Decimal(amount) for category in SpecialtyCategory}


DEFAULT_SALARY_TABLE: dict[CareerStage, dict[SpecialtyCategory, Decimal]] = {
    CareerStage.MEDICAL_STUDENT: _flat_row("0"),
    CareerStage.RESIDENT_FELLOW: _flat_row("60000"),
    CareerStage.NEW_ATTENDING: {
        SpecialtyCategory.PRIMARY_CARE: Decimal("250000"),
        SpecialtyCategory.SURGERY: Decimal("450000"),
        SpecialtyCategory.HOSPITAL_BASED: Decimal("380000"),
        SpecialtyCategory.SPECIALTY_MEDICINE: Decimal("420000"),
        SpecialtyCategory.ANESTHESIOLOGY: Decimal("380000"),
        SpecialtyCategory.EMERGENCY_MEDICINE: Decimal("350000"),
        SpecialtyCategory.INTERNAL_MEDICINE: Decimal("250000"),
        SpecialtyCategory.FAMILY_MEDICINE: Decimal("240000"),
    },
    CareerStage.EXPERIENCED_PHYSICIAN: {
        SpecialtyCategory.PRIMARY_CARE: Decimal("280000"),
        SpecialtyCategory.SURGERY: Decimal("550000"),
        SpecialtyCategory.HOSPITAL_BASED: Decimal("450000"),
        SpecialtyCategory.SPECIALTY_MEDICINE: Decimal("500000"),
        SpecialtyCategory.ANESTHESIOLOGY: Decimal("450000"),
        SpecialtyCategory.EMERGENCY_MEDICINE: Decimal("400000"),
        SpecialtyCategory.INTERNAL_MEDICINE: Decimal("280000"),
        SpecialtyCategory.FAMILY_MEDICINE: Decimal("270000"),
    },
}

# Residency growth is steep because the projection spans the jump to an attending salary.
DEFAULT_GROWTH_RATES: dict[CareerStage, Decimal] = {
    CareerStage.MEDICAL_STUDENT: Decimal("0.03"),
    CareerStage.RESIDENT_FELLOW: Decimal("0.15"),
    CareerStage.NEW_ATTENDING: Decimal("0.05"),
    CareerStage.EXPERIENCED_PHYSICIAN: Decimal("0.03"),
}

DEFAULT_AGE_ESTIMATES: dict[CareerStage, int] = {
    CareerStage.MEDICAL_STUDENT: 25,
    CareerStage.RESIDENT_FELLOW: 28,
    CareerStage.NEW_ATTENDING: 32,
    CareerStage.EXPERIENCED_PHYSICIAN: 40,
}

DEFAULT_APPROVAL_TIERS: tuple[ApprovalTier, ...] = (
    ApprovalTier("excellent", Decimal("200000"), Decimal("3.0"), 95),
    ApprovalTier("good", Decimal("150000"), Decimal("4.0"), 85),
    ApprovalTier("fair", Decimal("100000"), Decimal("5.0"), 70),
)

DEFAULT_TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(Decimal("400000"), Decimal("0.35")),
    TaxBracket(Decimal("200000"), Decimal("0.32")),
    TaxBracket(Decimal("100000"), Decimal("0.24")),
)


@dataclass(frozen=True)
class EngineConfig:
    version: str = CONFIG_VERSION
    poverty_guideline: Decimal = Decimal("15650")
    poverty_multiplier: Decimal = Decimal("1.5")
    idr_income_share: Decimal = Decimal("0.10")
    pslf_payment_requirement: int = 120
    growth_rates: Mapping[CareerStage, Decimal] = field(default_factory=lambda: dict(DEFAULT_GROWTH_RATES))
    salary_table: Mapping[CareerStage, Mapping[SpecialtyCategory, Decimal]] = field(
        default_factory=lambda: {stage: dict(row) for stage, row in DEFAULT_SALARY_TABLE.items()}
    )
    age_estimates: Mapping[CareerStage, int] = field(default_factory=lambda: dict(DEFAULT_AGE_ESTIMATES))
    refinance_rates_pct: tuple[Decimal, ...] = tuple(Decimal(r) for r in ("3.5", "4.0", "4.5", "5.0", "5.5", "6.0"))
    refinance_terms_years: tuple[int, ...] = (5, 7, 10, 15, 20)
    max_debt_to_income: Decimal = Decimal("0.15")
    approval_tiers: tuple[ApprovalTier, ...] = DEFAULT_APPROVAL_TIERS
    fallback_tier: ApprovalTier = ApprovalTier("challenging", Decimal("0"), Decimal("0"), 40)
    tax_brackets: tuple[TaxBracket, ...] = DEFAULT_TAX_BRACKETS
    default_marginal_rate: Decimal = Decimal("0.22")
    state_tax_rate: Decimal = Decimal("0.05")
    baseline_federal_rate_pct: Decimal = Decimal("5.5")
    standard_plan_rate_pct: Decimal = Decimal("6.8")
    standard_plan_months: int = 120
    interest_deduction_cap: Decimal = Decimal("2500")
    single_phase_out: tuple[Decimal, Decimal] = (Decimal("70000"), Decimal("85000"))
    married_phase_out: tuple[Decimal, Decimal] = (Decimal("140000"), Decimal("170000"))

    def __post_init__(self) -> None:
        missing_growth = [stage.value for stage in CareerStage if stage not in self.growth_rates]
        if missing_growth:
            raise ConfigurationError(f"growth rate table missing stages {missing_growth}")
        missing_ages = [stage.value for stage in CareerStage if stage not in self.age_estimates]
        if missing_ages:
            raise ConfigurationError(f"age table missing stages {missing_ages}")
        for stage in CareerStage:
            row = self.salary_table.get(stage)
            if row is None:
                raise ConfigurationError(f"salary table missing stage {stage.value}")
            missing = [category.value for category in SpecialtyCategory if category not in row]
            if missing:
                raise ConfigurationError(f"salary table for {stage.value} missing categories {missing}")
        if not self.refinance_rates_pct:
            raise ConfigurationError("refinance rate grid is empty")
        if not self.refinance_terms_years:
            raise ConfigurationError("refinance term grid is empty")
        if any(term <= 0 for term in self.refinance_terms_years):
            raise ConfigurationError("refinance terms must be positive")
        if any(not Decimal("0") <= rate <= Decimal("100") for rate in self.refinance_rates_pct):
            raise ConfigurationError("refinance rates must be within 0-100%")
        if self.poverty_guideline <= 0:
            raise ConfigurationError("poverty guideline must be positive")
        if self.pslf_payment_requirement <= 0 or self.standard_plan_months <= 0:
            raise ConfigurationError("payment counts must be positive")

        # Tables are read-only views over private copies.
        object.__setattr__(self, "growth_rates", MappingProxyType(dict(self.growth_rates)))
        object.__setattr__(self, "age_estimates", MappingProxyType(dict(self.age_estimates)))
        object.__setattr__(
            self,
            "salary_table",
            MappingProxyType({stage: MappingProxyType(dict(row)) for stage, row in self.salary_table.items()}),
        )

    def salary_for(self, stage: CareerStage, category: SpecialtyCategory) -> Decimal:
        return self.salary_table[stage][category]

    def growth_rate_for(self, stage: CareerStage) -> Decimal:
        return self.growth_rates[stage]

    def age_for(self, stage: CareerStage) -> int:
        return self.age_estimates[stage]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build a config from a JSON document; the four tables are mandatory."""

        for key in ("growth_rates", "salary_table", "refinance_rates_pct", "refinance_terms_years"):
            if not data.get(key):
                raise ConfigurationError(f"engine config is missing the {key} table")

        try:
            growth = {CareerStage.from_raw(k, field="career stage"): Decimal(str(v)) for k, v in data["growth_rates"].items()}
            salaries = {
                CareerStage.from_raw(stage, field="career stage"): {
                    SpecialtyCategory.from_raw(category, field="specialty category"): Decimal(str(amount))
                    for category, amount in row.items()
                }
                for stage, row in data["salary_table"].items()
            }
            ages = data.get("age_estimates")
            overrides: dict[str, Any] = {
                "growth_rates": growth,
                "salary_table": salaries,
                "refinance_rates_pct": tuple(Decimal(str(rate)) for rate in data["refinance_rates_pct"]),
                "refinance_terms_years": tuple(int(term) for term in data["refinance_terms_years"]),
            }
            if ages:
                overrides["age_estimates"] = {
                    CareerStage.from_raw(k, field="career stage"): int(v) for k, v in ages.items()
                }
            for key in (
                "poverty_guideline",
                "max_debt_to_income",
                "state_tax_rate",
                "baseline_federal_rate_pct",
                "standard_plan_rate_pct",
            ):
                if data.get(key) is not None:
                    overrides[key] = Decimal(str(data[key]))
            if data.get("version"):
                overrides["version"] = str(data["version"])
        except ConfigurationError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise ConfigurationError(f"invalid engine config: {exc}") from exc

        return cls(**overrides)
