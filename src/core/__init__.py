"""SPLIT-IT core: domain, services and configuration."""
