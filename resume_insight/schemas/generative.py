"""Pydantic schemas for the JSON returned by the generative service (untrusted input)."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _as_str_list(value: Any) -> Any:
    """LLMs answer null or a bare string where a list is expected; normalize both."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return value


def _as_optional_str(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class GenerativeSkills(BaseModel):
    """Skills split into categories. `technical` is None when the model omitted it."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    technical: Optional[List[str]] = Field(default=None, description="Technical skills")
    soft: List[str] = Field(default_factory=list, description="Soft skills")
    tools: List[str] = Field(default_factory=list, description="Tools and technologies")

    @field_validator("soft", "tools", mode="before")
    @classmethod
    def _lists(cls, v: Any) -> Any:
        return _as_str_list(v)

    @field_validator("technical", mode="before")
    @classmethod
    def _technical(cls, v: Any) -> Any:
        return None if v is None else _as_str_list(v)


class GenerativeExperience(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    years: Optional[str] = Field(default=None, description="Estimated years of experience")
    level: Optional[str] = Field(default=None, description="junior/mid/senior/lead/executive")
    highlights: List[str] = Field(default_factory=list, description="Key achievements and responsibilities")

    @field_validator("years", "level", mode="before")
    @classmethod
    def _scalars(cls, v: Any) -> Any:
        return _as_optional_str(v)

    @field_validator("highlights", mode="before")
    @classmethod
    def _highlights(cls, v: Any) -> Any:
        return _as_str_list(v)


class GenerativeEducation(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    degree: Optional[str] = Field(default=None, description="Highest degree obtained")
    field: Optional[str] = Field(default=None, description="Field of study")
    institution: Optional[str] = Field(default=None, description="Institution name")

    @field_validator("degree", "field", "institution", mode="before")
    @classmethod
    def _scalars(cls, v: Any) -> Any:
        return _as_optional_str(v)


class GenerativeAnalysis(BaseModel):
    """Raw structured analysis from the generative service, validated but not yet normalized."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    summary: str = Field(default="", description="2-3 sentence summary of the candidate")
    skills: GenerativeSkills = Field(default_factory=GenerativeSkills)
    experience: GenerativeExperience = Field(default_factory=GenerativeExperience)
    education: GenerativeEducation = Field(default_factory=GenerativeEducation)
    strengths: List[str] = Field(default_factory=list)
    areas_for_improvement: List[str] = Field(default_factory=list)
    score: Any = Field(default=None, description="Score exactly as returned (1-100 expected); any shape, coerced later")
    recommendations: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_flat_shapes(cls, data: Any) -> Any:
        """Accept flat lists where nested objects are expected (skills, experience) and a plain education string."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if isinstance(data.get("skills"), list):
            data["skills"] = {"technical": data["skills"]}
        if isinstance(data.get("experience"), list):
            data["experience"] = {"highlights": data["experience"]}
        education = data.get("education")
        if isinstance(education, str):
            data["education"] = {"degree": education}
        elif isinstance(education, list):
            data["education"] = {"degree": "; ".join(str(e) for e in education if e)}
        for key in ("skills", "experience", "education"):
            if data.get(key) is None:
                data.pop(key, None)
        if data.get("summary") is None:
            data.pop("summary", None)
        return data

    @field_validator("strengths", "areas_for_improvement", "recommendations", mode="before")
    @classmethod
    def _lists(cls, v: Any) -> Any:
        return _as_str_list(v)


class JobComparison(BaseModel):
    """Resume vs job description comparison returned by the generative service."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    match_score: int = Field(default=0, ge=0, le=100, description="Percentage match, 0-100")
    matching_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    @field_validator(
        "matching_skills", "missing_skills", "strengths", "concerns", "recommendations", mode="before"
    )
    @classmethod
    def _lists(cls, v: Any) -> Any:
        return _as_str_list(v)
