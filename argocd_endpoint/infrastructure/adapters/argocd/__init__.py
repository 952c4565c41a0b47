"""ArgoCD adapters."""

from .accounts_client import ArgoCDAccountsClient

__all__ = ["ArgoCDAccountsClient"]
