"""Per-source raw record normalizers.

Each upstream source family ships a different JSON layout. The functions
here map one raw record onto the canonical ``Recall`` shape. They never
raise on malformed input: missing or wrongly-typed fields degrade to empty
strings, ``None`` dates, or the default severity tier.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from core.constants import (
    ACTIVE_STATUS,
    CLOSED_STATUS,
    DEFAULT_SEVERITY,
    MAX_TITLE_LENGTH,
    NHTSA_RECALL_URL_PREFIX,
    UNITED_STATES,
    VEHICLE_COMPONENT_PREFIX_LENGTH,
)
from core.types import Recall, SourceShape
from transforms.classification import classification_to_severity, consequence_to_severity
from transforms.date_normalization import normalize_date

RawRecord = Mapping[str, Any]
RecordNormalizer = Callable[[RawRecord, str], Recall]


def normalize_records(
    shape: SourceShape,
    agency: str,
    raw_records: Iterable[object],
) -> list[Recall]:
    """Normalize a batch of raw records from one source.

    Args:
        shape: Raw layout family of the source.
        agency: Agency tag stamped on every record.
        raw_records: Decoded JSON array elements.

    Returns:
        One canonical recall per raw element, in input order.
    """
    normalizer = _NORMALIZERS[shape]
    return [normalizer(_as_mapping(raw_record), agency) for raw_record in raw_records]


def normalize_fda(record: RawRecord, agency: str) -> Recall:
    """Normalize an FDA enforcement report row."""
    description = _text(record.get("product_description"))
    reason = _text(record.get("reason_for_recall"))
    classification = _text(record.get("classification"))
    return Recall(
        agency=agency,
        recall_number=_text(record.get("recall_number")),
        title=description[:MAX_TITLE_LENGTH],
        product_description=description,
        reason=reason,
        hazard=reason,
        remedy="",
        classification=classification,
        severity=classification_to_severity(classification),
        date_reported=normalize_date(record.get("report_date")),
        date_initiated=normalize_date(record.get("recall_initiation_date")),
        status=_text(record.get("status")),
        affected_count=_text(record.get("product_quantity")),
        distribution=_text(record.get("distribution_pattern")),
        recalling_firm=_text(record.get("recalling_firm")),
        city=_text(record.get("city")),
        state=_text(record.get("state")),
        country=_text(record.get("country")),
        url="",
    )


def normalize_cpsc(record: RawRecord, agency: str) -> Recall:
    """Normalize a CPSC recall with nested named sub-objects."""
    hazard_text = "; ".join(_names(record.get("Hazards"), "Name", keep_empty=True))
    remedy_text = "; ".join(_names(record.get("Remedies"), "Name", keep_empty=True))
    manufacturers = _names(record.get("Manufacturers"), "Name")
    distributors = _names(record.get("Distributors"), "Name")
    firm = (manufacturers or distributors or [""])[0]
    units = ", ".join(_names(record.get("Products"), "NumberOfUnits"))
    countries = ", ".join(_names(record.get("ManufacturerCountries"), "Country", keep_empty=True))
    recall_date = normalize_date(record.get("RecallDate"))
    return Recall(
        agency=agency,
        recall_number=_text(record.get("RecallNumber")) or _text(record.get("RecallID")),
        title=_text(record.get("Title"))[:MAX_TITLE_LENGTH],
        product_description=_text(record.get("Description")),
        reason=hazard_text,
        hazard=hazard_text,
        remedy=remedy_text,
        classification="",
        severity=DEFAULT_SEVERITY,
        date_reported=recall_date,
        date_initiated=recall_date,
        status=ACTIVE_STATUS,
        affected_count=units,
        distribution="",
        recalling_firm=firm,
        country=countries,
        url=_text(record.get("URL")),
    )


def normalize_nhtsa(record: RawRecord, agency: str) -> Recall:
    """Normalize an NHTSA campaign aggregated across model years."""
    makes = _text(record.get("makes"))
    component = _text(record.get("component"))[:VEHICLE_COMPONENT_PREFIX_LENGTH]
    title = f"{makes} {_year_range(record)}: {component}".strip()
    summary = _text(record.get("summary"))
    consequence = _text(record.get("consequence"))
    campaign_number = _text(record.get("campaign_number"))
    report_date = normalize_date(record.get("report_date"))
    return Recall(
        agency=agency,
        recall_number=campaign_number,
        title=title[:MAX_TITLE_LENGTH],
        product_description=summary,
        reason=summary,
        hazard=consequence,
        remedy=_text(record.get("remedy")),
        classification="",
        severity=consequence_to_severity(consequence),
        date_reported=report_date,
        date_initiated=report_date,
        status=ACTIVE_STATUS,
        affected_count=_text(record.get("affected_count")),
        distribution=UNITED_STATES,
        recalling_firm=makes,
        country=UNITED_STATES,
        url=f"{NHTSA_RECALL_URL_PREFIX}{campaign_number}" if campaign_number else "",
    )


def normalize_fsis(record: RawRecord, agency: str) -> Recall:
    """Normalize a USDA FSIS recall API row."""
    reason = _text(record.get("field_recall_reason"))
    classification = _text(record.get("field_recall_classification"))
    description = _text(record.get("field_product_items")) or _text(record.get("field_summary"))
    states = _text(record.get("field_states"))
    recall_date = normalize_date(record.get("field_recall_date"))
    return Recall(
        agency=agency,
        recall_number=_text(record.get("field_recall_number")),
        title=_text(record.get("field_title"))[:MAX_TITLE_LENGTH],
        product_description=description,
        reason=reason,
        hazard=reason,
        remedy="",
        classification=classification,
        severity=classification_to_severity(classification),
        date_reported=recall_date,
        date_initiated=recall_date,
        status=_fsis_status(record.get("field_active_notice")),
        affected_count=_text(record.get("field_qty_recovered")),
        distribution=states,
        recalling_firm=_text(record.get("field_establishment")),
        state=states,
        country=UNITED_STATES,
        url=_text(record.get("field_recall_url")),
    )


_NORMALIZERS: dict[str, RecordNormalizer] = {
    "fda": normalize_fda,
    "cpsc": normalize_cpsc,
    "nhtsa": normalize_nhtsa,
    "fsis": normalize_fsis,
}


def _as_mapping(raw_record: object) -> RawRecord:
    return raw_record if isinstance(raw_record, Mapping) else {}


def _text(value: object) -> str:
    """Coerce a scalar JSON value to text; containers and null become empty."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (int, float)):
        return str(value) if value else ""
    return ""


def _names(items: object, key: str, keep_empty: bool = False) -> list[str]:
    """Collect one text field from a list of sub-objects.

    Args:
        items: Raw list of sub-objects.
        key: Field name to collect.
        keep_empty: Keep empty values so joined text matches the list length.

    Returns:
        Collected field values in list order.
    """
    if not isinstance(items, list):
        return []
    values = [_text(item.get(key)) if isinstance(item, Mapping) else "" for item in items]
    if keep_empty:
        return values
    return [value for value in values if value]


def _year_range(record: RawRecord) -> str:
    year_min = _text(record.get("year_min"))
    year_max = _text(record.get("year_max"))
    if record.get("year_min") == record.get("year_max"):
        return year_min
    return f"{year_min}-{year_max}"


def _fsis_status(active_notice: object) -> str:
    if isinstance(active_notice, bool):
        return ACTIVE_STATUS if active_notice else CLOSED_STATUS
    text = _text(active_notice).strip().lower()
    if text == "true":
        return ACTIVE_STATUS
    if text == "false":
        return CLOSED_STATUS
    return ""
