"""Contracts for the three parts of a call: arguments, keywords and block."""
from .arguments_contract import ArgumentsContract
from .keywords_contract import KeywordsContract
from .signature_contract import SignatureContract

__all__ = ["ArgumentsContract", "KeywordsContract", "SignatureContract"]
