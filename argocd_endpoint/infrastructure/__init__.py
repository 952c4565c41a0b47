"""Infrastructure layer - adapters for ArgoCD, Kubernetes and kopf."""
