"""Scoring strategies for RNA secondary-structure designs, with option, command-line, logging, text, file and graph utilities."""

__version__ = "0.1.0"