"""Core services: validation, calculation and orchestration."""
