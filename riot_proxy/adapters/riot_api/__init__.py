"""Riot API adapter package.

This package contains the Riot API client adapter for the riot-proxy service.
"""

from .client import (
    RiotAPIClient,
    UpstreamOutcome,
    OutcomeKind,
    USER_AGENT,
)

__all__ = [
    # Client
    "RiotAPIClient",
    "USER_AGENT",
    # Outcomes
    "UpstreamOutcome",
    "OutcomeKind",
]
