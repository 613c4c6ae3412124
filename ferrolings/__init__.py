"""Compile, run, verify and watch a course of small exercises."""

__version__ = "0.1.0"