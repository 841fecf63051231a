# model/api.py
from typing import List
from pydantic import BaseModel, Field
from model.analysis import AnalysisResult


class AnalyzeResponse(BaseModel):
    results: List[AnalysisResult] = Field(default_factory=list)
    totalFound: int = 0

    @classmethod
    def of(cls, results: List[AnalysisResult]) -> "AnalyzeResponse":
        return cls(results=results, totalFound=len(results))


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    ok: bool
