import os
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

load_dotenv()


def get_engine(env_var: str, fallback: Optional[str] = None) -> Engine:
    url = os.getenv(env_var, fallback)
    if not url:
        raise RuntimeError(f"Database URL for {env_var} is not configured")
    return create_engine(url, echo=False, future=True)
