"""Tokens, AST nodes, lexer, optimizer, error contexts and builtins for ArkScript."""

__version__ = "0.1.0"