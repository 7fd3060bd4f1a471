"""Business logic services."""

from .analysis_service import AnalysisService
