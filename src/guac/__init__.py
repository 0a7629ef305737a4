'''
Algebraic RPN calculator.

Numbers are exact rationals in any radix from 2 to 64, and expressions stay
symbolic: 2 sqrt stays sqrt(2), pi 2 * stays 2·π. Every operator result is
canonicalized, so equal values built in different orders look the same.
Entries can be shown approximately without losing their exact value.

Stack words are dc-like where dc has one (dup, swap, drop, clear), plus
selection, undo and redo.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine


__all__ = 'Machine', 'Lexer', 'CLI'
