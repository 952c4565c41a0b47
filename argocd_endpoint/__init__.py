"""ArgoCD Endpoint Provider - issues ArgoCD account tokens into Kubernetes secrets."""
