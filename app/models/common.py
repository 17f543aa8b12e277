from __future__ import annotations

from enum import StrEnum
from typing import Self

from app.core.errors import ValidationError


def _normalize(raw: str) -> str:
    return "".join(ch for ch in raw.strip().lower() if ch.isalnum())


class _ParsableEnum(StrEnum):
    """Accepts the display value (``ResidentFellow``) and wizard ids (``resident-fellow``)."""

    @classmethod
    def _aliases(cls) -> dict[str, Self]:
        return {}

    @classmethod
    def lookup(cls, raw: str | None) -> Self | None:
        if raw is None:
            return None
        if isinstance(raw, cls):
            return raw
        value = _normalize(str(raw))
        for member in cls:
            if value == _normalize(member.value):
                return member
        return cls._aliases().get(value)

    @classmethod
    def from_raw(cls, raw: str | None, *, field: str) -> Self:
        member = cls.lookup(raw)
        if member is None:
            raise ValidationError(f"unsupported {field}: {raw!r}")
        return member


class LoanKind(_ParsableEnum):
    FEDERAL = "Federal"
    PRIVATE = "Private"


class CareerStage(_ParsableEnum):
    MEDICAL_STUDENT = "MedicalStudent"
    RESIDENT_FELLOW = "ResidentFellow"
    NEW_ATTENDING = "NewAttending"
    EXPERIENCED_PHYSICIAN = "ExperiencedPhysician"

    @classmethod
    def _aliases(cls) -> dict[str, Self]:
        return {
            "student": cls.MEDICAL_STUDENT,
            "resident": cls.RESIDENT_FELLOW,
            "fellow": cls.RESIDENT_FELLOW,
            "attending": cls.NEW_ATTENDING,
            "experienced": cls.EXPERIENCED_PHYSICIAN,
        }


class CareerGoal(_ParsableEnum):
    HOSPITAL_EMPLOYEE = "HospitalEmployee"
    PRIVATE_PRACTICE = "PrivatePractice"
    ACADEMIC_MEDICINE = "AcademicMedicine"
    PUBLIC_SERVICE = "PublicService"
    GOVERNMENT = "Government"
    NOT_SURE = "NotSure"

    @classmethod
    def _aliases(cls) -> dict[str, Self]:
        return {"academic": cls.ACADEMIC_MEDICINE, "undecided": cls.NOT_SURE}


class EmployerType(_ParsableEnum):
    NONPROFIT_501C3 = "NonProfit501c3"
    GOVERNMENT = "Government"
    ACADEMIC = "Academic"
    PRIVATE = "Private"
    UNKNOWN = "Unknown"

    @classmethod
    def _aliases(cls) -> dict[str, Self]:
        return {
            "501c3nonprofit": cls.NONPROFIT_501C3,
            "501c3": cls.NONPROFIT_501C3,
            "nonprofit": cls.NONPROFIT_501C3,
        }

    @classmethod
    def parse(cls, raw: str | None) -> "EmployerType":
        return cls.lookup(raw) or cls.UNKNOWN


class SpecialtyCategory(_ParsableEnum):
    PRIMARY_CARE = "primary-care"
    SURGERY = "surgery"
    HOSPITAL_BASED = "hospital-based"
    SPECIALTY_MEDICINE = "specialty-medicine"
    ANESTHESIOLOGY = "anesthesiology"
    EMERGENCY_MEDICINE = "emergency-medicine"
    INTERNAL_MEDICINE = "internal-medicine"
    FAMILY_MEDICINE = "family-medicine"

    @classmethod
    def _aliases(cls) -> dict[str, Self]:
        return {
            "surgical": cls.SURGERY,
            "specialty": cls.SPECIALTY_MEDICINE,
            "emergency": cls.EMERGENCY_MEDICINE,
            "pediatrics": cls.PRIMARY_CARE,
            "radiology": cls.HOSPITAL_BASED,
            "pathology": cls.HOSPITAL_BASED,
        }

    @classmethod
    def for_specialty(cls, specialty: str) -> "SpecialtyCategory":
        return cls.lookup(specialty) or cls.PRIMARY_CARE


class StrategyType(StrEnum):
    PSLF = "PSLF"
    REFINANCE = "Refinance"


class Confidence(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Priority(StrEnum):
    CRITICAL = "critical"
    HIGH = "high"
