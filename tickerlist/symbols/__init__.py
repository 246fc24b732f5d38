"""Symbol parsing, normalisation and cross-exchange de-duplication."""
