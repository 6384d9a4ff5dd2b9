"""Candidate profile and work preference models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

ExperienceLevel = Literal["entry", "mid", "senior", "lead"]


class WorkPreferences(BaseModel):
    """Location, remote and salary preferences shared by candidates and jobs."""

    job_types: list[str] = Field(default_factory=list, description="Employment types")
    locations: list[str] = Field(default_factory=list, description="Acceptable locations")
    remote: bool = Field(default=False, description="Whether remote work is wanted/offered")
    salary_min: int | None = Field(default=None, ge=0, description="Minimum annual salary")
    salary_max: int | None = Field(default=None, ge=0, description="Maximum annual salary")

    @model_validator(mode="after")
    def validate_salary_range(self) -> WorkPreferences:
        """Ensure salary_min <= salary_max when both are set."""
        if (
            self.salary_min is not None
            and self.salary_max is not None
            and self.salary_min > self.salary_max
        ):
            msg = f"salary_min ({self.salary_min}) > salary_max ({self.salary_max})"
            raise ValueError(msg)
        return self


class ExperienceSummary(BaseModel):
    """Candidate work history summary."""

    years: float = Field(default=0.0, ge=0, description="Years of professional experience")
    level: ExperienceLevel = Field(default="entry", description="Seniority level")
    industries: list[str] = Field(default_factory=list, description="Industries worked in")


class EducationSummary(BaseModel):
    """Highest education entry."""

    degree: str = Field(default="", description="Degree name, e.g. 'Bachelor of Science'")
    field: str = Field(default="", description="Field of study")
    institution: str = Field(default="", description="University/college name")


class CandidateProfile(BaseModel):
    """Structured candidate data used to derive a breakdown."""

    id: str | None = Field(default=None, description="Candidate identifier")
    skills: list[str] = Field(default_factory=list, description="Skill names")
    experience: ExperienceSummary = Field(default_factory=ExperienceSummary)
    education: EducationSummary = Field(default_factory=EducationSummary)
    preferences: WorkPreferences = Field(default_factory=WorkPreferences)
