from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession

from .config import ANGLE_MEASURES, Config
from .util import GuacError
from .machine import Machine
from .lexer import Lexer
from .radix import parse_radix, radix_name
from . import ops


logger = logging.getLogger(__name__)


def _radix(text):
    try:
        return parse_radix(text)
    except GuacError as e:
        raise ArgumentTypeError(str(e)) from e


class InteractiveInput:
    def __init__(self, prompt, toolbar=None):
        self.prompt = prompt
        self.toolbar = toolbar

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Radix and angle measure.
                                    bottom_toolbar=self.toolbar,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


def setup_logging(verbose=False):
    '''
    Send the package's log records to stderr.
    '''
    handler = logging.StreamHandler(stderr)
    handler.setFormatter(
        logging.Formatter('%(name)s: %(levelname)s: %(message)s'))
    root = logging.getLogger('guac')
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '

    def machine(self):
        return Machine(Config(radix=self.args.radix,
                              precision=self.args.precision,
                              angle_measure=self.args.angle))

    def dumper(self):
        '''
        Dump all lexemes matches and arity.
        '''
        lexer = Lexer(self.args.radix or Config.DEFAULT_RADIX)
        print('[groups]\t<repr(repr)>\t<arity>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                matched = match.group(0)
                groups = lexer.matchedgroups(match)
                word = groups.get('name') or groups.get('operator')
                print(*groups.keys(),
                      repr(matched),
                      ops.arity(ops.OPERATORS[word])
                      if word in ops.OPERATORS else '',
                      sep='\t')

    def printstack(self, machine):
        '''
        Print all entries, top of the stack first.
        '''
        if len(machine):
            print(*reversed(machine.render_stack()), sep='\n')

    def executor(self):
        '''
        Run machine (RPN calculator).
        '''
        machine = self.machine()
        lexer = Lexer(machine.config.radix)
        if self._interactive():
            self.args.expressions.toolbar = lambda: '{} {}'.format(
                radix_name(machine.config.radix),
                machine.config.angle_measure)
        for line in self.args.expressions:
            try:
                for match in lexer.lex(line):
                    if lexer.isfeedable(match):
                        machine.feed(lexer.matchedgroups(match))
            # Abort entire rest of line, makes sense anyway
            except GuacError as e:
                logger.debug('aborted %r', line, exc_info=True)
                print(e, file=stderr)
            if self._interactive():
                self.printstack(machine)
        if not self._interactive():
            self.printstack(machine)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer(self.args.radix or Config.DEFAULT_RADIX)
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Algebraic RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-r', '--radix',
                                          type=_radix,
                                          help='input and display radix, '
                                               'like 16 or hex')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='digits after the radix point '
                                               'in approximate display')
        self.argument_parser.add_argument('-a', '--angle',
                                          choices=sorted(ANGLE_MEASURES),
                                          help='angle measure of '
                                               'trigonometric operators')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        setup_logging(self.args.verbose)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except GuacError as e:
            print(e, file=stderr)
            exit(1)
        except KeyboardInterrupt:
            exit(1)
