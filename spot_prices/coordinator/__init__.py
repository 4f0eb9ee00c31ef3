"""Orchestration of provider fallback and result assembly."""
