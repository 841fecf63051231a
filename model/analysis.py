# model/analysis.py
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class RaviStatus(str, Enum):
    Thiqah = "Thiqah"
    Zaeef = "Zaeef"
    Unknown = "Unknown"

    @classmethod
    def parse(cls, value: object) -> "RaviStatus":
        """Map free-form labels (e.g. model output) onto a status, else Unknown."""
        raw = str(value or "").strip().lower()
        if raw in ("thiqah", "thiqa"):
            return cls.Thiqah
        if raw in ("zaeef", "daeef", "zaeef/daeef"):
            return cls.Zaeef
        return cls.Unknown


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    bookName: str
    status: RaviStatus = RaviStatus.Unknown
    page: int = Field(ge=1)  # 1-based, approximate (see core/segmenter.py)
    context: str = Field(max_length=200)
