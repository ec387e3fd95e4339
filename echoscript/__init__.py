"""Lexer, value model and syntax-tree evaluator for EchoScript."""

__version__ = "0.1.0"
__all__ = ["lexer", "value", "nodes"]