"""Client and models for the remote position-analysis service."""

from chessdss.analysis.models import (
    AnalysisResult,
    BestMove,
    PayoffMatrix,
    PositionReport,
    WinProbability,
)
from chessdss.analysis.service import AnalysisClient

__all__ = [
    "AnalysisClient",
    "AnalysisResult",
    "BestMove",
    "PayoffMatrix",
    "PositionReport",
    "WinProbability",
]
