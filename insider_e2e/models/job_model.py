from pydantic import BaseModel, Field
from typing import Any, Optional, List


class JobDetails(BaseModel):
    position: str = ""
    department: str = ""
    location: str = ""
    source_element: Optional[Any] = Field(default=None, exclude=True, repr=False)  # Job card WebElement

    def combined_text(self) -> str:
        return " ".join(part for part in (self.position, self.department, self.location) if part)

    def is_complete(self) -> bool:
        return bool(self.position and self.department and self.location)

    def __str__(self) -> str:
        return f"JobDetails(position='{self.position}', department='{self.department}', location='{self.location}')"


class ValidationResult(BaseModel):
    job: JobDetails
    is_valid: bool = True
    errors: List[str] = Field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.is_valid = False


class ValidationSummary(BaseModel):
    total_jobs: int = 0
    passed_jobs: int = 0
    failed_jobs: int = 0
    all_errors: List[str] = Field(default_factory=list)

    @classmethod
    def from_results(cls, results: List[ValidationResult]) -> "ValidationSummary":
        summary = cls()
        for index, result in enumerate(results, 1):
            summary.total_jobs += 1
            if result.is_valid:
                summary.passed_jobs += 1
            else:
                summary.failed_jobs += 1
                summary.all_errors.extend(f"Job {index}: {error}" for error in result.errors)
        return summary

    @property
    def success_rate(self) -> float:
        """Percentage of jobs that passed, 0.0 when nothing was validated."""
        if self.total_jobs == 0:
            return 0.0
        return self.passed_jobs / self.total_jobs * 100

    @property
    def has_errors(self) -> bool:
        return self.failed_jobs > 0 or bool(self.all_errors)

    def to_dict(self) -> dict:
        return {
            "totalJobs": self.total_jobs,
            "passedJobs": self.passed_jobs,
            "failedJobs": self.failed_jobs,
            "successRate": round(self.success_rate, 1),
            "errors": self.all_errors,
        }
