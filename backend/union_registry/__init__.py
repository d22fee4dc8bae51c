"""Union Registry backend: cross-dealer employee registry with audit trail."""
