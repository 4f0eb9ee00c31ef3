"""Base classes shared by the provider and rate transports."""
