"""projectguard - role-based access control and field redaction for project tracking."""

__version__ = "0.1.0"
