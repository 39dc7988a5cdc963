"""
Static lookup tables.
"""
from primkit.registry.states import (
    STATE_CODES,
    STATE_NAMES,
    get_state_code,
    get_state_name,
    is_state_code,
    is_state_name,
)

__all__ = [
    "STATE_CODES",
    "STATE_NAMES",
    "get_state_code",
    "get_state_name",
    "is_state_code",
    "is_state_name",
]
