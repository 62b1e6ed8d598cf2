"""
Free-text field extraction for job cards
Classifies the lines of a scraped job card into position, department and location
"""
import re
from typing import Dict, List, Optional
import logging

from insider_e2e.models.job_model import JobDetails
from insider_e2e.services.page_utils import clean_text, fold_text

logger = logging.getLogger(__name__)


# Lines that contain one of these are treated as the job location
LOCATION_KEYWORDS = [
    'istanbul', 'turkey', 'turkiye', 'türkiye', 'remote', 'hybrid',
    'london', 'paris', 'berlin', 'amsterdam', 'new york', 'singapore',
    'dubai', 'tokyo', 'seoul', 'madrid', 'warsaw', 'sydney',
]

LOCATION_PATTERNS = [
    r'^[A-ZÇĞİÖŞÜ][\w\s.\-]+,\s*[A-ZÇĞİÖŞÜ][\w\s.\-]+$',  # City, Country
    r'^[A-Z][a-z]+,\s*[A-Z]{2}$',  # City, ST
]

# "Label: value" prefixes mapped onto JobDetails fields
FIELD_LABELS = {
    'location': 'location',
    'office': 'location',
    'department': 'department',
    'team': 'department',
    'position': 'position',
    'title': 'position',
    'role': 'position',
}

# Button and link text that appears inside job cards
NOISE_LINES = {
    'view role', 'apply', 'apply now', 'apply for this job', 'learn more',
    'see details', 'read more', 'view job', 'details',
}

LABEL_PATTERN = re.compile(r'^\s*(?P<label>[A-Za-z]+)\s*:\s*(?P<value>.+)$')


def split_lines(text: Optional[str]) -> List[str]:
    """Non-empty, whitespace-normalised lines of a text block"""
    if not text:
        return []
    lines = [clean_text(line) for line in text.splitlines()]
    return [line for line in lines if line]


def is_noise_line(line: str) -> bool:
    return line.lower().strip(' .›»>') in NOISE_LINES


def has_location_keyword(line: str) -> bool:
    folded = fold_text(line)
    return any(fold_text(keyword) in folded for keyword in LOCATION_KEYWORDS)


def matches_location_pattern(line: str) -> bool:
    return any(re.match(pattern, line) for pattern in LOCATION_PATTERNS)


def looks_like_location(line: str) -> bool:
    """A line is a location when it names a known place or matches a City, Country pattern"""
    return has_location_keyword(line) or matches_location_pattern(line)


def _pick_location_index(lines: List[str]) -> Optional[int]:
    # Known place names beat the comma pattern, which also matches titles like "QA Engineer, Mobile"
    for index, line in enumerate(lines):
        if has_location_keyword(line):
            return index
    for index in range(len(lines) - 1, -1, -1):
        if matches_location_pattern(lines[index]):
            return index
    return None


def parse_job_text(text: Optional[str]) -> Dict[str, str]:
    """
    Classify job card lines into position, department and location

    Labelled lines ("Location: Istanbul") win; otherwise a line that looks
    like a place is the location and the remaining lines are position then
    department, in card order.

    Args:
        text: Job card text, one field per line

    Returns:
        Dict with position, department and location keys; missing fields are ""
    """
    fields = {'position': '', 'department': '', 'location': ''}
    unlabelled = []

    for line in split_lines(text):
        if is_noise_line(line):
            continue

        match = LABEL_PATTERN.match(line)
        if match:
            field_name = FIELD_LABELS.get(match.group('label').lower())
            if field_name and not fields[field_name]:
                fields[field_name] = clean_text(match.group('value'))
                continue

        unlabelled.append(line)

    if not fields['location']:
        location_index = _pick_location_index(unlabelled)
        if location_index is not None:
            fields['location'] = unlabelled.pop(location_index)

    for field_name in ('position', 'department'):
        if not fields[field_name] and unlabelled:
            fields[field_name] = unlabelled.pop(0)

    return fields


def extract_job_details(
    card_text: Optional[str],
    position: Optional[str] = None,
    department: Optional[str] = None,
    location: Optional[str] = None,
    source_element=None
) -> JobDetails:
    """
    Build JobDetails from selector-extracted values, filling gaps from the card text

    Nothing is invented: a field neither selector nor text parsing could
    find stays empty so validation reports it.
    """
    parsed = parse_job_text(card_text)
    job = JobDetails(
        position=clean_text(position) or parsed['position'],
        department=clean_text(department) or parsed['department'],
        location=clean_text(location) or parsed['location'],
        source_element=source_element,
    )

    if not job.is_complete():
        missing = [name for name in ('position', 'department', 'location') if not getattr(job, name)]
        logger.warning(f"⚠ Could not extract {', '.join(missing)} from job card: {clean_text(card_text)[:80]!r}")

    return job
