"""Resume analysis: heuristic engine, generative analyzer, scoring, and normalization."""

from resume_insight.analysis.generative import GenerativeAnalyzer
from resume_insight.analysis.heuristic import HeuristicAnalyzer, analyze_heuristically, extract_contact_info
from resume_insight.analysis.keywords import DEFAULT_KEYWORD_TABLES, KeywordTables
from resume_insight.analysis.normalize import AnalyzerResult, GenerativeResult, HeuristicResult, normalize_result
from resume_insight.analysis.scoring import calculate_score, coerce_score, generate_suggestions

__all__ = [
    "HeuristicAnalyzer",
    "GenerativeAnalyzer",
    "KeywordTables",
    "DEFAULT_KEYWORD_TABLES",
    "analyze_heuristically",
    "extract_contact_info",
    "calculate_score",
    "generate_suggestions",
    "coerce_score",
    "AnalyzerResult",
    "HeuristicResult",
    "GenerativeResult",
    "normalize_result",
]
