from functools import reduce
import operator

import regex

from .util import ParseError
from .machine import Machine
from . import ops
from .radix import DECIMAL, DIGITS, EXPONENT_MARK, check_radix, \
                   digit_class, has_exponent_e


class Lexer:
    '''
    Lexer for the calculator's *regular* grammar.

    Numbers depend on the input radix, so a lexer is built for one radix.
    '''
    # Any digit of any radix, for numbers with an explicit radix prefix.
    ANY_DIGIT = digit_class(len(DIGITS))
    # Number with an explicit radix, like hex#ff or g#-1.8
    PREFIXED = r'''
                (?:
                    (?:[^\W\d_]{{3}}|{ANY})
                    \#
                    -?
                    {ANY}*
                    (?:
                        \.
                        {ANY}*
                    )?
                    (?:
                        /
                        {ANY}+
                    )?
                    (?:
                        {EXPONENT}
                        -?
                        {ANY}+
                    )?
                )
                '''.format(ANY=ANY_DIGIT, EXPONENT=EXPONENT_MARK)
    # Number in the input radix.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              (?:
                  (?:
                      # 1, 12, 1. (notice trailing dot), 1.3
                      {DIGIT}+
                      (?:
                          \.
                          {DIGIT}*
                      )?
                  )|(?:
                      # .2
                      \.
                      {DIGIT}+
                  )
              )
              (?:
                  # 1/3, 1.5/2
                  /
                  {DIGIT}+
                  (?:
                      \.
                      {DIGIT}*
                  )?
              )?
              (?:
                  # 1.2ᴇ3, or 1.2e3 where e is no digit
                  {EXPONENT}
                  -?
                  {DIGIT}+
              )?
              '''
    # Numbers end at a word boundary; 12abc is no number.
    END = r'(?![\w.\#])'
    # Quoted variable name, or a one-character one after a backslash.
    STR = r'''
           (?:
               '
               (?<__str__>
                   (?:
                       [^'\\]
                       |
                       \\.
                   )*
               )
               '
           )|(?:
               \\
               (?<__str__>
                   \S
               )
           )
           '''
    # Constants, variables and word operators.
    NAME = r'[^\W\d]\w*'

    # Operator and command words win over numbers spelled with the same
    # digits, like add in hex.
    WORDS = sorted((word
                    for word
                    in list(ops.NAMES) + list(Machine.COMMANDS)
                    if word.isalpha()),
                   key=len, reverse=True)
    WORD = r'(?:' + r'|'.join(map(regex.escape, WORDS)) + r')(?![\w\#])'

    SYMBOLS = [symbol
               for symbol
               in list(ops.SYMBOLS) + list(Machine.COMMANDS)
               if not symbol.isalpha()]
    assert not [symbol
                for symbol
                in SYMBOLS
                if len(symbol) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, SYMBOLS)) + r')'
    SPACE = r'\s+'

    # Default regex flags for matching lexemes. Alternatives are tried in
    # order: after operator words, a number wins over a name spelled with
    # the same letters.
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self, radix=DECIMAL):
        self.radix = check_radix(radix)
        exponent = '[e' + EXPONENT_MARK + ']' if has_exponent_e(radix) \
            else EXPONENT_MARK
        number = type(self).NUMBER.format(DIGIT=digit_class(radix),
                                          EXPONENT=exponent)
        # All possible lexemes.
        self.LEXEME = r'(?<name>' + type(self).WORD + r')|' \
                      r'(?<number>(?:' + type(self).PREFIXED + r'|' \
                      + number + r')' + type(self).END + r')|' \
                      r'(?<str>' + type(self).STR + r')|' \
                      r'(?<name>' + type(self).NAME + r')|' \
                      r'(?<operator>' + type(self).OPERATOR + r')|' \
                      r'(?<space>' + type(self).SPACE + r')'
        self.pattern = regex.compile(self.LEXEME, flags=type(self).FLAGS)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Doesn't yield incomplete or incorrect lexemes, stopping on first bad.
        '''
        while line:
            match = self.pattern.match(line)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise ParseError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to machine.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the groups the lexeme matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value is not None}
