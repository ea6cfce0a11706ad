from fastapi import Request
from analytics.config import HandicapConfig


def get_handicap_config(request: Request) -> HandicapConfig:
    """FastAPI dependency that provides the handicap settings."""
    config = getattr(request.app.state, "handicap_config", None)
    return config or HandicapConfig()
