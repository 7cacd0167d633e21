"""Utility helpers for the resume_match application."""
