"""
US state code/name lookup.

STATE_NAMES maps two-letter USPS codes to Title Case names. STATE_CODES is
generated from it at import time. Both are read-only views.
"""
from types import MappingProxyType
from typing import Any, Mapping, Optional

from primkit.core.logging_config import setup_logger
from primkit.transform.text import titleize, to_upper, trim

logger = setup_logger(__name__)

STATE_NAMES: Mapping[str, str] = MappingProxyType({
    "AL": "Alabama",
    "AK": "Alaska",
    "AZ": "Arizona",
    "AR": "Arkansas",
    "CA": "California",
    "CO": "Colorado",
    "CT": "Connecticut",
    "DE": "Delaware",
    "FL": "Florida",
    "GA": "Georgia",
    "HI": "Hawaii",
    "ID": "Idaho",
    "IL": "Illinois",
    "IN": "Indiana",
    "IA": "Iowa",
    "KS": "Kansas",
    "KY": "Kentucky",
    "LA": "Louisiana",
    "ME": "Maine",
    "MD": "Maryland",
    "MA": "Massachusetts",
    "MI": "Michigan",
    "MN": "Minnesota",
    "MS": "Mississippi",
    "MO": "Missouri",
    "MT": "Montana",
    "NE": "Nebraska",
    "NV": "Nevada",
    "NH": "New Hampshire",
    "NJ": "New Jersey",
    "NM": "New Mexico",
    "NY": "New York",
    "NC": "North Carolina",
    "ND": "North Dakota",
    "OH": "Ohio",
    "OK": "Oklahoma",
    "OR": "Oregon",
    "PA": "Pennsylvania",
    "RI": "Rhode Island",
    "SC": "South Carolina",
    "SD": "South Dakota",
    "TN": "Tennessee",
    "TX": "Texas",
    "UT": "Utah",
    "VT": "Vermont",
    "VA": "Virginia",
    "WA": "Washington",
    "WV": "West Virginia",
    "WI": "Wisconsin",
    "WY": "Wyoming",
})

STATE_CODES: Mapping[str, str] = MappingProxyType(
    {name: code for code, name in STATE_NAMES.items()}
)


def _normalize_code(state_code: Any) -> str:
    return to_upper(trim(state_code))


def _normalize_name(state_name: Any) -> str:
    return titleize(trim(state_name))


def get_state_name(state_code: Any) -> Optional[str]:
    """
    Return the state name for a two-letter code, in any case.

    Examples:
        get_state_name("CT") → "Connecticut"
        get_state_name("ny") → "New York"
        get_state_name("ZZ") → None
    """
    key = _normalize_code(state_code)
    name = STATE_NAMES.get(key)
    if name is None:
        logger.debug(f"Unknown state code: {state_code!r}")
    return name


def get_state_code(state_name: Any) -> Optional[str]:
    """
    Return the two-letter code for a state name, in any case.

    Examples:
        get_state_code("Connecticut") → "CT"
        get_state_code("NEW YORK") → "NY"
    """
    key = _normalize_name(state_name)
    code = STATE_CODES.get(key)
    if code is None:
        logger.debug(f"Unknown state name: {state_name!r}")
    return code


def is_state_code(state_code: Any) -> bool:
    return _normalize_code(state_code) in STATE_NAMES


def is_state_name(state_name: Any) -> bool:
    return _normalize_name(state_name) in STATE_CODES
