"""Create Windows Start Menu shortcuts for an editor's recently opened projects."""

__version__ = "0.1.0"