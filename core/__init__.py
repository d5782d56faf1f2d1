"""Core error types shared across the hiring wizards."""
