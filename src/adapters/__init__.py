"""Adapters: purchase sources and exporters."""
