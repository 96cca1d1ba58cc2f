"""A small HTML tokenizer, tree builder, DOM and selector engine."""

__version__ = "0.1.0"
__all__ = ["dom", "node", "parser", "query", "tokenizer", "utils"]