from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, List, Optional

import httpx
from dotenv import load_dotenv

from name_resolution_engine.settings.config import (
    ResolutionConfig,
    get_resolution_config,
)

load_dotenv()

logger = logging.getLogger(__name__)


class PlayerSourceError(RuntimeError):
    pass


class PlayerApiClient:
    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout_s: float = 15.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if not api_url:
            raise ValueError("Player API URL is required")
        self.api_url = api_url
        self.api_key = api_key
        self.timeout_s = timeout_s
        self.transport = transport
        self.last_latency_ms: Optional[float] = None

    @classmethod
    def from_config(cls, config: Optional[ResolutionConfig] = None) -> "PlayerApiClient":
        config = config or get_resolution_config()
        api_key = os.getenv(config.player_api_key_env, "")
        if not api_key:
            raise PlayerSourceError(
                f"{config.player_api_key_env} environment variable not set"
            )
        return cls(config.player_api_url, api_key, timeout_s=config.player_api_timeout_s)

    @staticmethod
    def _extract_players(data: Any) -> List[Dict[str, Any]]:
        if isinstance(data, list):
            return [item for item in data if isinstance(item, dict)]
        if isinstance(data, dict):
            for key in ("data", "items", "results"):
                if isinstance(data.get(key), list):
                    return [item for item in data[key] if isinstance(item, dict)]
        return []

    def fetch_players(self) -> List[Dict[str, Any]]:
        headers = {"api_key": self.api_key, "Content-Type": "application/json"}
        start_time = time.monotonic()
        try:
            with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
                response = client.get(self.api_url, headers=headers)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            raise PlayerSourceError(f"Player request to {self.api_url} failed") from exc
        except ValueError as exc:
            raise PlayerSourceError(
                f"Invalid JSON response from player API {self.api_url}"
            ) from exc
        finally:
            self.last_latency_ms = (time.monotonic() - start_time) * 1000
            logger.debug(
                "Player request completed url=%s latency_ms=%.2f",
                self.api_url,
                self.last_latency_ms,
            )
        players = self._extract_players(data)
        logger.info("Found %s players", len(players))
        return players
