"""Abstract contracts implemented by adapters and consumed by the service layer."""
