"""Port for the ArgoCD accounts API - driven/secondary port."""

from typing import Protocol


class AccountsClient(Protocol):
    """
    Port for issuing ArgoCD credentials.

    Implementations are bound to one server and hold no session state.
    """

    async def create_session(self, username: str, password: str) -> str:
        """
        Log in and return a bearer session token.

        Raises:
            AuthFailedError: If the login fails.
        """
        ...

    async def create_token_for_account(self, auth_token: str, name: str, expires_in: int = 0) -> str:
        """
        Generate a token for the named account.

        Args:
            auth_token: Session token returned by ``create_session``.
            name: Account name.
            expires_in: Lifetime in seconds; 0 means the token never expires.

        Raises:
            MintFailedError: If the token cannot be generated.
        """
        ...


class AccountsClientFactory(Protocol):
    """Builds an accounts client for a server."""

    def __call__(self, *, server_url: str, user_agent: str = "", debug: bool = False) -> AccountsClient:
        """
        Raises:
            MissingServerURLError: If ``server_url`` is empty.
        """
        ...
