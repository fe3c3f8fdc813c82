from typing import Any, Dict, List, Optional

import pandas as pd

from name_resolution_engine.matchers.catalog_matcher import (
    CatalogEntry,
    CatalogIndex,
    build_catalog_index,
    resolve,
)
from name_resolution_engine.normalizers.contact_normalizer import (
    normalize_email,
    normalize_phone_number,
    split_full_name,
)
from name_resolution_engine.normalizers.name_normalizer import normalize_name

SEARCH_COLUMNS = {
    "first_name": "first_name",
    "last_name": "last_name",
    "email": "email_address",
    "phone": "phone_number",
    "school_irn": "high_school_irn",
}


def _value(row: pd.Series, column: str) -> str:
    value = row.get(column)
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()


def _player_id(value: Any) -> Any:
    # numpy scalars from read_sql are not JSON serializable
    return value.item() if hasattr(value, "item") else value


def _display_name(row: pd.Series) -> str:
    name = f"{_value(row, 'first_name')} {_value(row, 'last_name')}".strip()
    return name or _value(row, "full_name")


def build_roster_catalog(players: pd.DataFrame) -> List[CatalogEntry]:
    catalog: List[CatalogEntry] = []
    for _, row in players.iterrows():
        canonical = _display_name(row)
        if not canonical:
            continue
        alternates = []
        full_name = _value(row, "full_name")
        if full_name and normalize_name(full_name) != normalize_name(canonical):
            alternates.append(full_name)
        nickname = _value(row, "nickname")
        last_name = _value(row, "last_name")
        if nickname and last_name:
            alternates.append(f"{nickname} {last_name}")
        catalog.append(
            CatalogEntry(
                canonical_name=canonical,
                alternate_names=tuple(alternates),
                payload=_player_id(row["id"]),
            )
        )
    return catalog


def find_roster_matches(
    signup: Dict[str, Any],
    roster: pd.DataFrame,
    catalog: Optional[CatalogIndex] = None,
) -> List[Dict[str, Any]]:
    """Candidate roster players for an incoming signup.

    Identity signals (email, phone) come first in roster order; the name
    cascade contributes at most one more player that is not already listed.
    """
    email = normalize_email(signup.get("email"))
    phone = normalize_phone_number(signup.get("phone_number"))
    candidates: List[Dict[str, Any]] = []
    seen = set()
    for _, row in roster.iterrows():
        signals = []
        if email and normalize_email(_value(row, "email_address")) == email:
            signals.append("email")
        if phone and normalize_phone_number(_value(row, "phone_number")) == phone:
            signals.append("phone")
        if not signals:
            continue
        player_id = _player_id(row["id"])
        seen.add(player_id)
        candidates.append(
            {
                "player_id": player_id,
                "matched_name": _display_name(row),
                "strategy": signals[0],
                "score": None,
                "signals": signals,
            }
        )

    full_name = signup.get("full_name") or " ".join(
        part for part in (signup.get("first_name"), signup.get("last_name")) if part
    )
    if full_name:
        index = catalog if catalog is not None else build_catalog_index(
            build_roster_catalog(roster)
        )
        match = resolve(full_name, index)
        if match is not None and match.entry.payload not in seen:
            candidates.append(
                {
                    "player_id": match.entry.payload,
                    "matched_name": match.canonical_name,
                    "strategy": match.strategy,
                    "score": match.score,
                    "signals": ["name"],
                }
            )
    return candidates


def search_roster(
    players: pd.DataFrame,
    name: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    school_irn: Optional[str] = None,
    limit: int = 50,
) -> pd.DataFrame:
    criteria: Dict[str, str] = {}
    if first_name:
        criteria["first_name"] = first_name
    if last_name:
        criteria["last_name"] = last_name
    if email:
        criteria["email"] = email
    if phone:
        criteria["phone"] = normalize_phone_number(phone)
    if school_irn:
        criteria["school_irn"] = school_irn
    if name and not first_name and not last_name:
        parsed_first, parsed_last = split_full_name(name)
        if parsed_first:
            criteria["first_name"] = parsed_first
        if parsed_last:
            criteria["last_name"] = parsed_last
    if not criteria:
        raise ValueError(
            "At least one search criterion is required "
            "(name, first_name, last_name, email, phone, school_irn)"
        )

    mask = pd.Series(True, index=players.index)
    for key, expected in criteria.items():
        column = SEARCH_COLUMNS[key]
        if column not in players.columns:
            return players.iloc[0:0]
        values = players[column].fillna("").astype(str)
        if key == "phone":
            mask &= values.map(normalize_phone_number) == expected
        else:
            mask &= values.str.strip().str.lower() == str(expected).strip().lower()
    return players[mask].head(limit)
