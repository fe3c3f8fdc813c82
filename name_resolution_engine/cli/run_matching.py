import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from name_resolution_engine.api.schemas import CommitmentReport
from name_resolution_engine.loaders.catalog_loader import load_catalog
from name_resolution_engine.loaders.player_api_client import PlayerApiClient
from name_resolution_engine.matchers.commitments_matcher import (
    extract_commitments,
    match_commitments,
)
from name_resolution_engine.settings.config import get_resolution_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Match player college commitments against the logo catalog"
    )
    parser.add_argument("--catalog", help="Path to the catalog JSON file")
    parser.add_argument(
        "--players-file",
        help="JSON list of player records; fetched from the player API when omitted",
    )
    parser.add_argument("--output", help="Write the report here instead of stdout")
    parser.add_argument("--log-level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_resolution_config()
    logging.basicConfig(
        level=(args.log_level or config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    catalog = load_catalog(args.catalog or config.catalog_path)
    if args.players_file:
        players = json.loads(Path(args.players_file).read_text(encoding="utf-8"))
    else:
        players = PlayerApiClient.from_config(config).fetch_players()

    report = match_commitments(extract_commitments(players), catalog)
    payload = json.dumps(CommitmentReport(**report).model_dump(by_alias=True), indent=2)
    if args.output:
        Path(args.output).write_text(payload + "\n", encoding="utf-8")
    else:
        sys.stdout.write(payload + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
