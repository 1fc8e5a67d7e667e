"""Core hosts file logic: validation, parsing, reconciliation and atomic writes."""
