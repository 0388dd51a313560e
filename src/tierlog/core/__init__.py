"""Core domain: models, ports, aggregate and encoders."""
