"""Document generator doubles."""

from src.modules.documents.generator import DocumentGenerator, DocumentRequest


class RecordingDocumentGenerator(DocumentGenerator):
    """Collects generation requests; optionally fails every call."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.requests: list[DocumentRequest] = []

    async def generate(self, request: DocumentRequest) -> None:
        self.requests.append(request)
        if self.fail:
            raise RuntimeError("renderer unavailable")
