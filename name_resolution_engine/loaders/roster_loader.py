from typing import Optional

import pandas as pd
from sqlalchemy import text
from sqlalchemy.engine import Engine

from name_resolution_engine.db.connections import get_engine
from name_resolution_engine.settings.config import (
    ResolutionConfig,
    get_resolution_config,
)

ROSTER_QUERY = text("SELECT * FROM players ORDER BY id")


def load_roster(
    engine: Optional[Engine] = None, config: Optional[ResolutionConfig] = None
) -> pd.DataFrame:
    if engine is None:
        config = config or get_resolution_config()
        engine = get_engine(config.roster_db_url_env, config.roster_db_fallback_url)
    with engine.connect() as conn:
        players = pd.read_sql(ROSTER_QUERY, conn)
    return players
