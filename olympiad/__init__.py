"""Solutions, a checker, a test generator and a simulated judge for olympiad tasks."""

__version__ = "0.1.0"