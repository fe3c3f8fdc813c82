import json
import logging
from functools import lru_cache
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException

from name_resolution_engine.api.schemas import (
    CommitmentReport,
    FindMatchesResponse,
    ResolveRequest,
    ResolveResponse,
    RosterSearchRequest,
    RosterSearchResponse,
    SignupInfo,
)
from name_resolution_engine.loaders.catalog_loader import CatalogLoadError, load_catalog
from name_resolution_engine.loaders.player_api_client import (
    PlayerApiClient,
    PlayerSourceError,
)
from name_resolution_engine.loaders.roster_loader import load_roster
from name_resolution_engine.matchers.catalog_matcher import CatalogMatcher
from name_resolution_engine.matchers.commitments_matcher import (
    extract_commitments,
    match_commitments,
)
from name_resolution_engine.matchers.roster_matcher import (
    find_roster_matches,
    search_roster,
)
from name_resolution_engine.normalizers.name_normalizer import normalize_name
from name_resolution_engine.settings.config import get_resolution_config

logger = logging.getLogger(__name__)

app = FastAPI(title="Name Resolution API")


@lru_cache
def get_catalog_matcher() -> CatalogMatcher:
    config = get_resolution_config()
    return CatalogMatcher(load_catalog(config.catalog_path))


def fetch_players() -> List[Dict[str, Any]]:
    return PlayerApiClient.from_config().fetch_players()


def _catalog_matcher() -> CatalogMatcher:
    try:
        return get_catalog_matcher()
    except CatalogLoadError as exc:
        logger.error("Catalog unavailable: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/resolve", response_model=ResolveResponse)
def resolve_name(request: ResolveRequest):
    match = _catalog_matcher().resolve(request.query)
    response = ResolveResponse(
        matched=match is not None,
        query=request.query,
        normalized_query=normalize_name(request.query),
    )
    if match is None:
        return response
    return response.model_copy(
        update={
            "matched_name": match.canonical_name,
            "matched_alias": match.matched_alias,
            "strategy": match.strategy,
            "score": match.score,
            "payload": match.entry.payload,
        }
    )


@app.get("/commitments/match", response_model=CommitmentReport)
def match_commitment_logos():
    matcher = _catalog_matcher()
    try:
        players = fetch_players()
    except PlayerSourceError as exc:
        logger.error("Player source unavailable: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    commitments = extract_commitments(players)
    logger.info("Found %s unique commitments", len(commitments))
    return CommitmentReport(**match_commitments(commitments, matcher))


@app.post("/players/find-matches", response_model=FindMatchesResponse)
def find_player_matches(signup: SignupInfo):
    if not any(signup.model_dump().values()):
        raise HTTPException(status_code=400, detail="Player information is required")
    roster = load_roster()
    matches = find_roster_matches(signup.model_dump(), roster)
    return FindMatchesResponse(
        matches=matches,
        count=len(matches),
        message=f"Found {len(matches)} potential matches",
    )


@app.post("/players/search", response_model=RosterSearchResponse)
def search_players(request: RosterSearchRequest):
    criteria = request.model_dump(exclude={"limit"})
    try:
        found = search_roster(load_roster(), limit=request.limit, **criteria)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    players = json.loads(found.to_json(orient="records"))
    return RosterSearchResponse(
        players=players,
        count=len(players),
        message=f"Found {len(players)} players matching criteria",
    )
