"""Keyword tables for heuristic analysis. Immutable; pass a custom instance to HeuristicAnalyzer to override."""

from dataclasses import dataclass
from typing import Iterator, Tuple

# (category, keywords) pairs; order matters: it is the order skills are reported in
SkillCategories = Tuple[Tuple[str, Tuple[str, ...]], ...]

DEFAULT_SKILL_CATEGORIES: SkillCategories = (
    (
        "programming",
        (
            "javascript", "python", "java", "c++", "c#", "php", "ruby", "go", "rust",
            "swift", "kotlin", "typescript", "react", "angular", "vue", "node.js",
            "express", "django", "flask", "spring", "laravel",
        ),
    ),
    (
        "databases",
        (
            "mysql", "postgresql", "mongodb", "redis", "sqlite", "oracle",
            "sql server", "dynamodb", "cassandra",
        ),
    ),
    (
        "cloud",
        ("aws", "azure", "gcp", "docker", "kubernetes", "terraform", "jenkins", "gitlab", "github actions"),
    ),
    (
        "tools",
        ("git", "jira", "confluence", "slack", "trello", "figma", "adobe", "photoshop", "illustrator"),
    ),
    (
        "frameworks",
        ("react", "angular", "vue", "bootstrap", "tailwind", "material-ui", "ant design", "jquery"),
    ),
    (
        "methodologies",
        ("agile", "scrum", "kanban", "waterfall", "devops", "ci/cd", "tdd", "bdd"),
    ),
)

DEFAULT_EXPERIENCE_KEYWORDS: Tuple[str, ...] = (
    "experience", "work", "employment", "job", "position", "role", "responsibilities",
    "managed", "led", "developed", "created", "implemented", "designed", "built",
    "years", "months", "senior", "junior", "lead", "manager", "director", "vp",
)

DEFAULT_EDUCATION_KEYWORDS: Tuple[str, ...] = (
    "education", "degree", "bachelor", "master", "phd", "university", "college",
    "school", "graduated", "gpa", "major", "minor", "certificate", "diploma",
)

DEFAULT_LOCATION_MARKERS: Tuple[str, ...] = ("location", "based", "address")


@dataclass(frozen=True)
class KeywordTables:
    """All keyword lists the heuristic analyzer matches against (lower-case)."""

    skills: SkillCategories = DEFAULT_SKILL_CATEGORIES
    experience: Tuple[str, ...] = DEFAULT_EXPERIENCE_KEYWORDS
    education: Tuple[str, ...] = DEFAULT_EDUCATION_KEYWORDS
    location_markers: Tuple[str, ...] = DEFAULT_LOCATION_MARKERS

    def iter_skill_keywords(self) -> Iterator[str]:
        """Every skill keyword in category order, then within-category order (may repeat)."""
        for _category, keywords in self.skills:
            yield from keywords


DEFAULT_KEYWORD_TABLES = KeywordTables()
