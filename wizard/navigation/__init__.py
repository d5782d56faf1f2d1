"""Streamlit navigation helpers for the wizards."""
