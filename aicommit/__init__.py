"""
AI Commit

Writes a commit message for the staged changes with DeepSeek and commits it
after confirmation.
"""

__version__ = "0.1.0"
