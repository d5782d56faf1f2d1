"""Utility helpers for the hiring wizards app."""
