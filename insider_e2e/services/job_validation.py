"""
Keyword validation of extracted job details against the applied filters
"""
import re
from typing import Iterable, List
import logging

from insider_e2e.models.job_model import JobDetails, ValidationResult, ValidationSummary
from insider_e2e.services.page_utils import fold_text

logger = logging.getLogger(__name__)


DEPARTMENT_KEYWORDS = ['quality', 'assurance', 'test']

# Whole-word variants, "qa" as a substring matches too many unrelated words
DEPARTMENT_WORD_KEYWORDS = ['qa']

# Spellings the site uses interchangeably
LOCATION_ALIASES = {
    'turkey': ['turkiye', 'türkiye'],
    'turkiye': ['turkey', 'türkiye'],
    'türkiye': ['turkey', 'turkiye'],
}


def matches_any_keyword(text: str, keywords: Iterable[str], whole_words: Iterable[str] = ()) -> bool:
    """True when text contains one of the keywords, ignoring case and accents"""
    folded = fold_text(text)
    if any(fold_text(keyword) in folded for keyword in keywords):
        return True
    return any(re.search(rf'\b{re.escape(fold_text(word))}\b', folded) for word in whole_words)


def location_keywords(expected_location: str) -> List[str]:
    """
    Keyword variants accepted for a location filter value

    "Istanbul, Turkey" -> ["istanbul", "turkey", "turkiye", "türkiye"]
    """
    keywords: List[str] = []
    for part in expected_location.split(','):
        part = part.strip().lower()
        if not part:
            continue
        for variant in [part] + LOCATION_ALIASES.get(part, []):
            if variant not in keywords:
                keywords.append(variant)
    return keywords


def is_qa_department(department: str) -> bool:
    """Quality Assurance, QA, Software Testing and the like"""
    return matches_any_keyword(department, DEPARTMENT_KEYWORDS, DEPARTMENT_WORD_KEYWORDS)


def department_keywords(expected_department: str) -> List[str]:
    """
    Keyword variants accepted for a department filter value

    The QA vocabulary only applies to a QA filter; "Sales" accepts "sales" alone.
    """
    keywords = list(DEPARTMENT_KEYWORDS) if is_qa_department(expected_department) else []
    words = [word for word in expected_department.lower().split() if len(word) > 2]
    for word in words or [expected_department.strip().lower()]:
        if word and word not in keywords:
            keywords.append(word)
    return keywords


def department_word_keywords(expected_department: str) -> List[str]:
    """Whole-word variants for a department filter value"""
    return list(DEPARTMENT_WORD_KEYWORDS) if is_qa_department(expected_department) else []


def validate_job(job: JobDetails, expected_location: str, expected_department: str) -> ValidationResult:
    """
    Check one job's position, department and location against the filters

    Args:
        job: Extracted job details
        expected_location: Location filter value, e.g. "Istanbul, Turkey"
        expected_department: Department filter value, e.g. "Quality Assurance"

    Returns:
        ValidationResult carrying one error per failed check
    """
    result = ValidationResult(job=job)
    dept_keywords = department_keywords(expected_department)
    dept_words = department_word_keywords(expected_department)
    loc_keywords = location_keywords(expected_location)

    if not job.position:
        result.add_error("Position could not be extracted")
    elif not matches_any_keyword(job.position, dept_keywords, dept_words):
        result.add_error(
            f"Position '{job.position}' does not contain any of {dept_keywords + dept_words}"
        )

    if not job.department:
        result.add_error("Department could not be extracted")
    elif not matches_any_keyword(job.department, dept_keywords, dept_words):
        result.add_error(
            f"Department '{job.department}' does not match '{expected_department}'"
        )

    if not job.location:
        result.add_error("Location could not be extracted")
    elif not matches_any_keyword(job.location, loc_keywords):
        result.add_error(
            f"Location '{job.location}' does not contain any of {loc_keywords}"
        )

    return result


def validate_jobs(jobs: List[JobDetails], expected_location: str, expected_department: str) -> ValidationSummary:
    """Validate every job and aggregate the results into a summary"""
    results = [validate_job(job, expected_location, expected_department) for job in jobs]

    for index, result in enumerate(results, 1):
        if result.is_valid:
            logger.info(f"✓ Job {index} passed: {result.job}")
        else:
            logger.warning(f"✗ Job {index} failed: {result.job} - {'; '.join(result.errors)}")

    summary = ValidationSummary.from_results(results)
    logger.info(
        f"Validation summary: {summary.passed_jobs}/{summary.total_jobs} passed "
        f"({summary.success_rate:.1f}%)"
    )
    return summary
