"""Project consistency validation and remediation."""

__version__ = "1.0.0"
