"""Analysis, scoring, recommendation and remediation services."""
