"""Runnable examples for flatkv: a CLI demo and a FastAPI service."""
