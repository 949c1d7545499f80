from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


DEFAULT_DEALER_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "EZ978": "Top Store",
        "QC759": "Golden Market",
        "WW013": "Premium Plaza",
        "LW097": "Fresh Mart",
        "TX140": "Super Center",
        "LF413": "Quality Shop",
        "MK256": "Best Buy",
        "RT891": "Corner Store",
        "PL634": "Mega Mall",
        "VN472": "Local Market",
    }
)


@dataclass(frozen=True, slots=True)
class Dealer:
    dealer_code: str
    dealer_name: str


def dealer_name_for(dealer_code: str, names: Mapping[str, str]) -> str:
    """Resolve a display name, falling back to 'Dealer <code>' for unknown codes."""
    return names.get(dealer_code) or f"Dealer {dealer_code}"
