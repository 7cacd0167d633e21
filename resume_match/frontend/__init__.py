"""Streamlit frontend for the resume_match application."""
