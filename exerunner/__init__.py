"""Status messages, rust-project.json generation and worked solutions for a course of exercises."""

__version__ = "5.4.1"