"""Corpus loading and output sinks."""
