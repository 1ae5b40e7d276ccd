"""Run two commands as a pipeline between an input file and an output file, with string, number, buffer, list and line-reading helpers."""

__version__ = "0.1.0"