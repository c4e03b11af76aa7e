from app.analysis.analyzer import ResumeAnalyzer
from app.analysis.base import BaseAnalyzer
from app.analysis.factory import AnalyzerFactory
from app.analysis.models import AnalysisResult

__all__ = ["AnalysisResult", "AnalyzerFactory", "BaseAnalyzer", "ResumeAnalyzer"]
