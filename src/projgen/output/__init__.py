"""Output formatting for ServiceResult (human and JSON modes)."""
