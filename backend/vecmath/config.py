"""Configuration for the vecmath HTTP service."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ServerConfig:
    """Settings for server.py."""
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    # Decimals to round every number in responses to (None = exact)
    result_precision: Optional[int] = None
