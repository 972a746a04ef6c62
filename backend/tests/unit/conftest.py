"""Unit test configuration.

Unit tests build their collaborators directly and never touch the
user's real report file.
"""
