"""
Structural and range validation for candidate records.

Validators never raise: every violated rule is collected into a
``ValidationResult`` so forms and importers can show all problems at once.

Typical usage:
    >>> result = validate_period_record({"startDate": "2024-01-01", "endDate": "2024-01-05"})
    >>> result.valid
    True
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from datetime import date
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from cycle_engine.models.record import FlowLevel, Mood, PeriodRecord
from cycle_engine.models.validation import ValidationResult
from cycle_engine.services.constants import (
    MAX_NOTES_LENGTH,
    MAX_PERIOD_LENGTH,
    MAX_SLEEP_HOURS,
    MAX_VALID_CYCLE_LENGTH,
    MAX_WATER_INTAKE_ML,
    MIN_CYCLE_LENGTH,
    MIN_PERIOD_LENGTH
)
from cycle_engine.services.exceptions import InvalidDateError
from cycle_engine.utils.dates import DateLike, days_between, is_valid_date, parse_date, today
from cycle_engine.utils.logging import logger, log_rejected_record

Candidate = Union[Mapping[str, Any], BaseModel]

RECORD_TYPE_ERROR = "Record must be an object"

def _candidate_fields(candidate: Candidate) -> Dict[str, Any]:
    if isinstance(candidate, BaseModel):
        return candidate.model_dump()
    if isinstance(candidate, Mapping):
        return dict(candidate)
    raise TypeError(f"Unsupported record type: {type(candidate).__name__}")

def _get(fields: Mapping[str, Any], name: str) -> Any:
    """Look a field up by snake_case name, falling back to its camelCase alias."""
    if name in fields:
        return fields[name]
    return fields.get(to_camel(name))

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)

def _check_date_field(value: Any, label: str, errors: List[str]) -> Optional[date]:
    if value is None or value == "":
        errors.append(f"{label} is required")
        return None
    if not is_valid_date(value):
        errors.append(f"{label} must be a valid YYYY-MM-DD date")
        return None
    return parse_date(value)

def _check_range(value: Any, label: str, upper: float, unit: str, errors: List[str]) -> None:
    if value is None:
        return
    if not _is_number(value):
        errors.append(f"{label} must be a number")
    elif not 0 <= value <= upper:
        errors.append(f"{label} must be between 0 and {upper} {unit}")

def is_valid_cycle_length(days: int) -> bool:
    """Check whether a cycle length is physiologically plausible."""
    return MIN_CYCLE_LENGTH <= days <= MAX_VALID_CYCLE_LENGTH

def has_overlap(new_record: Candidate, existing_records: Iterable[PeriodRecord]) -> bool:
    """
    Check whether a candidate's span intersects any existing record.

    Both spans are inclusive, so records sharing a single day overlap.
    A candidate with missing or malformed dates, or of an unsupported type,
    overlaps nothing.
    """
    try:
        fields = _candidate_fields(new_record)
        new_start = parse_date(_get(fields, "start_date"))
        new_end = parse_date(_get(fields, "end_date"))
    except (InvalidDateError, TypeError) as e:
        logger.warning("Skipping overlap check for malformed candidate", extra={"reason": str(e)})
        return False

    return any(
        new_start <= record.end_date and new_end >= record.start_date
        for record in existing_records
    )

def validate_period_record(
    candidate: Candidate,
    existing_records: Optional[Iterable[PeriodRecord]] = None
) -> ValidationResult:
    """
    Validate a candidate period record.

    Args:
        candidate: Mapping (snake_case or camelCase keys) or model
        existing_records: Records to check for overlap; a record with the same
            ``serial_num`` as the candidate is ignored so edits do not clash
            with themselves

    Returns:
        ValidationResult listing every violated rule
    """
    try:
        fields = _candidate_fields(candidate)
    except TypeError:
        logger.exception("Rejected period record of unsupported type")
        return ValidationResult.from_errors([RECORD_TYPE_ERROR])

    errors: List[str] = []
    start = _check_date_field(_get(fields, "start_date"), "Start date", errors)
    end = _check_date_field(_get(fields, "end_date"), "End date", errors)

    if start is not None and end is not None:
        if start > end:
            errors.append("End date cannot be earlier than start date")
        length = days_between(start, end) + 1
        if not MIN_PERIOD_LENGTH <= length <= MAX_PERIOD_LENGTH:
            errors.append(
                f"Period length must be between {MIN_PERIOD_LENGTH} and {MAX_PERIOD_LENGTH} days"
            )

        if existing_records is not None:
            serial_num = _get(fields, "serial_num")
            others = [
                record for record in existing_records
                if serial_num is None or record.serial_num != serial_num
            ]
            if has_overlap({"start_date": start, "end_date": end}, others):
                errors.append("Period overlaps an existing record")

    if errors:
        log_rejected_record(logger, "period", errors)
    return ValidationResult.from_errors(errors)

def validate_daily_record(candidate: Candidate, current_date: Optional[DateLike] = None) -> ValidationResult:
    """
    Validate a candidate daily record.

    Args:
        candidate: Mapping (snake_case or camelCase keys) or model
        current_date: Latest allowed date, defaults to today

    Returns:
        ValidationResult listing every violated rule
    """
    try:
        fields = _candidate_fields(candidate)
    except TypeError:
        logger.exception("Rejected daily record of unsupported type")
        return ValidationResult.from_errors([RECORD_TYPE_ERROR])

    errors: List[str] = []
    record_date = _check_date_field(_get(fields, "date"), "Date", errors)
    if record_date is not None:
        latest = today() if current_date is None else parse_date(current_date)
        if record_date > latest:
            errors.append("Date cannot be in the future")

    diet = _get(fields, "diet")
    if not isinstance(diet, str) or not diet.strip():
        errors.append("Diet record is required")

    _check_range(_get(fields, "water_intake"), "Water intake", MAX_WATER_INTAKE_ML, "ml", errors)
    _check_range(_get(fields, "sleep_hours"), "Sleep hours", MAX_SLEEP_HOURS, "hours", errors)

    notes = _get(fields, "notes")
    if notes and len(str(notes)) > MAX_NOTES_LENGTH:
        errors.append(f"Notes cannot exceed {MAX_NOTES_LENGTH} characters")

    flow_level = _get(fields, "flow_level")
    if flow_level is not None and flow_level not in {level.value for level in FlowLevel}:
        errors.append(f"Unknown flow level: {flow_level}")

    mood = _get(fields, "mood")
    if mood is not None and mood not in {m.value for m in Mood}:
        errors.append(f"Unknown mood: {mood}")

    if errors:
        log_rejected_record(logger, "daily", errors)
    return ValidationResult.from_errors(errors)

def validate_import_data(payload: Any) -> ValidationResult:
    """
    Validate an exported data envelope before import.

    The payload must be an object holding ``periodRecords`` and
    ``dailyRecords`` lists. Every period record is validated; its errors are
    reported prefixed with its 1-based position.
    """
    if not isinstance(payload, Mapping):
        return ValidationResult.from_errors(["Import data must be an object"])

    errors: List[str] = []
    period_records = payload.get("periodRecords")
    if not isinstance(period_records, list):
        errors.append("Period records must be a list")
    if not isinstance(payload.get("dailyRecords"), list):
        errors.append("Daily records must be a list")

    if isinstance(period_records, list):
        for index, record in enumerate(period_records, start=1):
            result = validate_period_record(record)
            if not result.valid:
                errors.append(f"Period record {index}: {', '.join(result.errors)}")

    logger.info("Validated import data", extra={
        "period_record_count": len(period_records) if isinstance(period_records, list) else 0,
        "error_count": len(errors)
    })
    return ValidationResult.from_errors(errors)
