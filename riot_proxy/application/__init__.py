"""Application layer for riot-proxy."""

from .flows import Envelope, IdentityFlow, IdentityQuery, RankFlow, RankQuery

__all__ = ["Envelope", "IdentityFlow", "IdentityQuery", "RankFlow", "RankQuery"]
