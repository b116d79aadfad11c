"""Tokenize, convert to RPN, evaluate and plot expressions of x as ASCII art."""

__version__ = "0.1.0"