"""Desktop studio for browsing and editing Markdown files, with a Tk window."""

__version__ = "0.1.0"