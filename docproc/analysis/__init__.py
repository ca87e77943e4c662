from docproc.analysis.base import BaseAnalyzer
from docproc.analysis.factory import AnalyzerFactory
from docproc.analysis.models import AnalysisResult

__all__ = ["AnalysisResult", "AnalyzerFactory", "BaseAnalyzer"]
