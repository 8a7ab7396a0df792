"""Range minimum queries and balanced-parentheses vectors with min-max tree search."""

__version__ = "0.1.0"