"""
Utilities package for dayone2md.

- fs: Journal file discovery and attachment indexing
- md: Markdown formatting for note metadata
"""
