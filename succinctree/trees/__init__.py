"""Parenthesis expressions with excess searches backed by a min-max tree and lookup tables."""