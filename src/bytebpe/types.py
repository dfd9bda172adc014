"""
Core types for tokenization.
"""

type Token = int
type TokenBytes = bytes
type TokenPair = tuple[Token, Token]
type Vocabulary = dict[Token, TokenBytes]
type MergeRule = tuple[TokenPair, Token]
