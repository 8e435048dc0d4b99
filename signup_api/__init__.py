"""Account sign-up API: controller, use case and SQL persistence."""

__version__ = "0.1.0"
