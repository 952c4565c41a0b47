"""Allow ``python -m argocd_endpoint``."""

from .main import main

main()
