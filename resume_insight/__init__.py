"""Resume Insight: resume text extraction, heuristic and generative analysis, scoring."""

__version__ = "0.1.0"
