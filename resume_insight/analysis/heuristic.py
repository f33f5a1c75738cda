"""Rule-based resume analysis: keyword skills, sentence highlights, regex contact info, score."""

import re
from typing import List, Sequence

from resume_insight.analysis.keywords import DEFAULT_KEYWORD_TABLES, KeywordTables
from resume_insight.analysis.scoring import calculate_score, generate_suggestions
from resume_insight.schemas.analysis import Analysis, ContactInfo
from resume_insight.utils.helpers import split_sentences

MAX_EXPERIENCE = 5
MAX_EDUCATION = 3
SUMMARY_SENTENCES = 3
SUMMARY_MIN_CHARS = 10

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
# Optional +1, optional parentheses around area code, '-', '.' or space between groups
PHONE_PATTERN = re.compile(r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")


def _matching_sentences(sentences: Sequence[str], keywords: Sequence[str], limit: int) -> List[str]:
    found: List[str] = []
    for sentence in sentences:
        lower = sentence.lower()
        if any(kw in lower for kw in keywords):
            found.append(sentence)
            if len(found) >= limit:
                break
    return found


def extract_contact_info(text: str, tables: KeywordTables = DEFAULT_KEYWORD_TABLES) -> ContactInfo:
    """Email, phone and location line from raw text. Missing fields are empty strings."""
    if not text:
        return ContactInfo()
    email = EMAIL_PATTERN.search(text)
    phone = PHONE_PATTERN.search(text)
    location = ""
    for line in text.splitlines():
        lower = line.lower()
        if any(marker in lower for marker in tables.location_markers):
            location = line.strip()
            break
    return ContactInfo(
        email=email.group(0) if email else "",
        phone=phone.group(0).strip() if phone else "",
        location=location,
    )


class HeuristicAnalyzer:
    """Deterministic analyzer over injected keyword tables. Never raises on any input text."""

    def __init__(self, tables: KeywordTables = DEFAULT_KEYWORD_TABLES) -> None:
        self._tables = tables

    def extract_skills(self, text: str) -> List[str]:
        """Known skill keywords present in the text, in table order, each once."""
        lower = (text or "").lower()
        found = [kw for kw in self._tables.iter_skill_keywords() if kw.lower() in lower]
        return list(dict.fromkeys(found))

    def extract_experience(self, text: str) -> List[str]:
        return _matching_sentences(split_sentences(text), self._tables.experience, MAX_EXPERIENCE)

    def extract_education(self, text: str) -> List[str]:
        return _matching_sentences(split_sentences(text), self._tables.education, MAX_EDUCATION)

    def extract_contact(self, text: str) -> ContactInfo:
        return extract_contact_info(text, self._tables)

    def summarize(self, text: str) -> str:
        sentences = [s for s in split_sentences(text) if len(s) > SUMMARY_MIN_CHARS]
        if not sentences:
            return ""
        return ". ".join(sentences[:SUMMARY_SENTENCES]) + "."

    def analyze(self, text: str) -> Analysis:
        skills = self.extract_skills(text)
        experience = self.extract_experience(text)
        education = self.extract_education(text)
        contact = self.extract_contact(text)
        score = calculate_score(skills, experience, education, contact)
        return Analysis(
            skills=skills,
            experience=experience,
            education=education,
            contact=contact,
            summary=self.summarize(text),
            score=score,
            suggestions=generate_suggestions(skills, experience, contact, score),
            source="heuristic",
        )


def analyze_heuristically(text: str, tables: KeywordTables = DEFAULT_KEYWORD_TABLES) -> Analysis:
    """Convenience wrapper: HeuristicAnalyzer(tables).analyze(text)."""
    return HeuristicAnalyzer(tables).analyze(text)
