"""Authenticated session against an ArgoCD server."""

from dataclasses import dataclass, field

DEFAULT_USER_AGENT = "Krateo Platfomops"


@dataclass(frozen=True, slots=True)
class Session:
    """
    Bearer session for one reconciliation pass.

    Never persisted, never shared between passes. The token is kept out of
    ``repr`` so the session can be logged safely.
    """

    server_url: str
    user_agent: str
    auth_token: str = field(repr=False)
    debug: bool = False
