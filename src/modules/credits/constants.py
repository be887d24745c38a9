"""Default catalog loaded into an empty database."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class DocumentCategory(str, Enum):
    STUDENT = "student_documents"
    ACADEMIC = "academic_documents"
    EXAM = "exam_documents"
    FINANCE = "finance_documents"
    STAFF = "staff_documents"


@dataclass(frozen=True)
class CreditPackageConfig:
    name: str
    credits: int
    price: Decimal
    description: str


@dataclass(frozen=True)
class DocumentCostConfig:
    document_type: str
    name: str
    category: DocumentCategory
    required_credits: int


DEFAULT_CREDIT_PACKAGES: tuple[CreditPackageConfig, ...] = (
    CreditPackageConfig(
        name="Free Monthly",
        credits=20,
        price=Decimal("0.00"),
        description="Free credits, claimable once a month",
    ),
    CreditPackageConfig(
        name="Starter",
        credits=50,
        price=Decimal("250.00"),
        description="For small schools getting started",
    ),
    CreditPackageConfig(
        name="Standard",
        credits=200,
        price=Decimal("900.00"),
        description="Term-long document generation",
    ),
    CreditPackageConfig(
        name="Premium",
        credits=500,
        price=Decimal("2000.00"),
        description="Full academic year for large schools",
    ),
)

DEFAULT_DOCUMENT_COSTS: tuple[DocumentCostConfig, ...] = (
    DocumentCostConfig("admit_card", "Admit Card", DocumentCategory.EXAM, 1),
    DocumentCostConfig("salary_slip", "Salary Slip", DocumentCategory.STAFF, 1),
    DocumentCostConfig("id_card", "Student ID Card", DocumentCategory.STUDENT, 2),
    DocumentCostConfig("teacher_id_card", "Teacher ID Card", DocumentCategory.STAFF, 2),
    DocumentCostConfig("fee_receipt", "Fee Receipt", DocumentCategory.FINANCE, 2),
    DocumentCostConfig("marksheet", "Mark Sheet", DocumentCategory.EXAM, 2),
    DocumentCostConfig(
        "transfer_certificate",
        "Transfer Certificate",
        DocumentCategory.ACADEMIC,
        3,
    ),
    DocumentCostConfig("certificate", "Certificate", DocumentCategory.ACADEMIC, 3),
    DocumentCostConfig("transcript", "Transcript", DocumentCategory.ACADEMIC, 4),
)
