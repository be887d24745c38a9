"""Hand-off point to the document rendering service."""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass

from src.utils.logger import get_logger


@dataclass(frozen=True)
class DocumentRequest:
    owner_id: str
    document_type: str
    quantity: int
    usage_id: int
    document_reference: str | None = None


class DocumentGenerator(ABC):
    """Renders documents once their credits have been debited.

    Implementations must not touch the ledger; a failure here is reported to
    the caller and logged, never refunded.
    """

    @abstractmethod
    async def generate(self, request: DocumentRequest) -> None: ...


class LoggingDocumentGenerator(DocumentGenerator):
    """Default generator that records the request for an external renderer."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    async def generate(self, request: DocumentRequest) -> None:
        self.logger.info("document_generation_requested", **asdict(request))
