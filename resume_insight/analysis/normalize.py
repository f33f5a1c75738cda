"""Map either analyzer's result onto the canonical Analysis shape."""

from dataclasses import dataclass
from typing import List, Union

from resume_insight.analysis.heuristic import HeuristicAnalyzer
from resume_insight.analysis.scoring import coerce_score
from resume_insight.schemas.analysis import Analysis
from resume_insight.schemas.generative import GenerativeAnalysis, GenerativeEducation
from resume_insight.utils.helpers import dedupe_preserving_order

# Values the model uses when it could not determine a field
PLACEHOLDER_VALUES = {"", "unknown", "n/a", "na", "none", "null", "not specified", "not available"}


@dataclass(frozen=True)
class HeuristicResult:
    analysis: Analysis


@dataclass(frozen=True)
class GenerativeResult:
    raw: GenerativeAnalysis


AnalyzerResult = Union[HeuristicResult, GenerativeResult]


def _meaningful(value: str | None) -> str:
    v = (value or "").strip()
    return "" if v.lower() in PLACEHOLDER_VALUES else v


def education_lines(education: GenerativeEducation) -> List[str]:
    """One readable line such as 'BSc in Computer Science, MIT'; empty when nothing is known."""
    degree = _meaningful(education.degree)
    field_of_study = _meaningful(education.field)
    institution = _meaningful(education.institution)
    head = " in ".join(p for p in (degree, field_of_study) if p)
    line = ", ".join(p for p in (head, institution) if p)
    return [line] if line else []


def normalize_result(result: AnalyzerResult, text: str, heuristic: HeuristicAnalyzer) -> Analysis:
    """
    Canonical Analysis from either analyzer.
    Contact info always comes from the regex extractor, never from the generative model.
    """
    contact = heuristic.extract_contact(text)

    if isinstance(result, HeuristicResult):
        return result.analysis.model_copy(update={"contact": contact})

    raw = result.raw
    technical = raw.skills.technical
    skills = dedupe_preserving_order(technical if technical is not None else heuristic.extract_skills(text))
    suggestions = dedupe_preserving_order([*raw.areas_for_improvement, *raw.recommendations])
    score = coerce_score(raw.score, fallback=heuristic.analyze(text).score)
    return Analysis(
        skills=skills,
        experience=dedupe_preserving_order(raw.experience.highlights),
        education=education_lines(raw.education),
        contact=contact,
        summary=(raw.summary or "").strip() or heuristic.summarize(text),
        score=score,
        suggestions=suggestions,
        source="generative",
        generative=raw,
    )
