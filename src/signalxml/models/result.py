from typing import Any, Literal

from signalxml.models.xml import MMS, SMS

Status = Literal["success", "error"]


class TranslationResult:
    def __init__(
        self, status: Status, message: str, record: SMS | MMS | None = None
    ) -> None:
        self.status = status
        self.message = message
        self.record = record

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "message": self.message,
            "record": self.record.model_dump() if self.record else None,
        }

    def __repr__(self) -> str:
        return f"<TranslationResult status={self.status} message={self.message}>"
