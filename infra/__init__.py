"""Infrastructure helpers (logging) for the hiring wizards."""
