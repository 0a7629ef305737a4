'''
The stack machine.

Holds the stack of entries, the optional selection and the undo history as
one state object. Every reportable failure is raised before anything
changes, so a failed call leaves the machine exactly as it was.
'''

from collections import namedtuple
from functools import partial
import logging

import regex

from . import constant, ops
from .config import Config, check_angle_measure, check_precision
from .display import render
from .expr import var, const, num
from .radix import PREFIX, check_radix, from_radix, parse_radix, radix_name
from .simplify import simplify
from .util import EmptyInput, GuacError, ParseError, StackUnderflow, \
                  wrap_user_errors


logger = logging.getLogger(__name__)


StackEntry = namedtuple('StackEntry', 'expr approx radix',
                        defaults=(False, None))

IDENTIFIER = regex.compile(r'[^\W\d]\w*')
ESCAPE = regex.compile(r'\\(.)', flags=regex.DOTALL)


class History:
    '''
    Snapshots of the stack, with a cursor on the current one.

    Recording after an undo discards the snapshots past the cursor.
    '''

    def __init__(self, initial=()):
        self.snapshots = [initial]
        self.cursor = 0

    @property
    def current(self):
        return self.snapshots[self.cursor]

    def record(self, snapshot):
        del self.snapshots[self.cursor + 1:]
        self.snapshots.append(snapshot)
        self.cursor += 1

    def undo(self):
        '''
        Step back; return the snapshot now current, or None at the start.
        '''
        if self.cursor == 0:
            return None
        self.cursor -= 1
        return self.current

    def redo(self):
        '''
        Step forward; return the snapshot now current, or None at the end.
        '''
        if self.cursor == len(self.snapshots) - 1:
            return None
        self.cursor += 1
        return self.current


class Machine:
    '''
    Algebraic RPN stack machine.

    Index 0 is the bottom of the stack. Operators act on the selected entry
    when there is a selection, on the top otherwise.
    '''

    def __init__(self, config=None):
        '''
        Create empty stack machine.

        :param config: Radix, precision and angle measure; defaults if None.
        '''
        self.config = config or Config()
        self.stack = ()
        self.selection = None
        self.history = History(self.stack)

    def __len__(self):
        return len(self.stack)

    def __getitem__(self, index):
        return self.stack[index].expr

    @property
    def exprs(self):
        return [entry.expr for entry in self.stack]

    def _commit(self, stack, selection=None):
        '''
        Replace the stack with a new snapshot and record it.
        '''
        self.stack = tuple(stack)
        self.selection = selection
        self.history.record(self.stack)

    def _target(self):
        '''
        Index of the selected entry, or of the top one.
        '''
        if self.selection is not None:
            return self.selection
        return len(self.stack) - 1

    def _valid(self, index):
        return 0 <= index < len(self.stack)

    # Pushing

    def push(self, expr, approx=False, radix=None):
        '''
        Push expr, canonicalized, as the new top.
        '''
        if radix is not None:
            check_radix(radix)
        entry = StackEntry(simplify(expr), approx, radix)
        self._commit(self.stack + (entry,), self.selection)

    def parse(self, text, radix=None):
        '''
        Read a number, constant or variable name.

        Returns the expression and the radix written as a prefix, if any.
        '''
        text = text.strip()
        if not text:
            raise EmptyInput()
        radix = self.config.radix if radix is None else check_radix(radix)
        if IDENTIFIER.fullmatch(text):
            try:
                return num(from_radix(text, radix)), None
            except ParseError:
                pass
            if constant.lookup(text) is not None:
                return const(text), None
            return var(text), None
        match = PREFIX.match(text.lstrip('-'))
        prefix = match.group('radix')
        return num(from_radix(text, radix)), \
            None if prefix is None else parse_radix(prefix)

    def push_input(self, text, radix=None):
        '''
        Parse text and push the result.

        A number written with an explicit ``abbv#`` prefix keeps that radix
        for display.
        '''
        expr, prefix = self.parse(text, radix)
        if prefix is None and radix is not None and \
           radix != self.config.radix:
            prefix = radix
        self.push(expr, radix=prefix)

    def push_variable(self, name):
        '''
        Push a variable, whatever its name looks like.
        '''
        self.push(var(ESCAPE.sub(r'\1', name)))

    # Operators

    def operator(self, name):
        '''
        Look up an operator, bound to the current angle measure if it takes
        one.
        '''
        try:
            f = ops.OPERATORS[name]
        except KeyError:
            raise ParseError('no such operator {!r}'.format(name)) from None
        if ops.takes_measure(f):
            return partial(f, measure=self.config.angle_measure)
        return f

    def apply(self, name):
        '''
        Apply an operator to the selected-or-top entry and those below it.

        The deepest operand is the first argument; the result replaces all
        operands at the lowest index.
        '''
        f = self.operator(name)
        arity = ops.arity(f)
        index = self._target()
        low = index - arity + 1
        if index < 0 or low < 0:
            raise StackUnderflow('{} needs {} entr{}'.format(
                name, arity, 'y' if arity == 1 else 'ies'))
        operands = self.stack[low:index + 1]
        result = f(*[entry.expr for entry in operands])
        entry = StackEntry(result,
                           any(entry.approx for entry in operands),
                           operands[0].radix)
        logger.debug('%s on %d entr%s at %d', name, arity,
                     'y' if arity == 1 else 'ies', low)
        selection = None if self.selection is None else low
        self._commit(self.stack[:low] + (entry,) + self.stack[index + 1:],
                     selection)

    # Stack words

    def pop(self):
        '''
        Remove and return the selected-or-top expression.
        '''
        index = self._target()
        if index < 0:
            raise StackUnderflow()
        expr = self.stack[index].expr
        self.drop(index)
        return expr

    def drop(self, target=None):
        '''
        Remove one entry, by index, or a range of entries.

        Defaults to the selected-or-top entry. Clears the selection if it
        was at or past the first removed entry.
        '''
        if target is None:
            target = self._target()
        if isinstance(target, range):
            indices = [i for i in target if self._valid(i)]
        elif self._valid(target):
            indices = [target]
        else:
            indices = []
        if not indices:
            logger.debug('nothing to drop at %s', target)
            return
        removed = set(indices)
        selection = self.selection
        if selection is not None and selection >= min(removed):
            selection = None
        self._commit([entry
                      for i, entry
                      in enumerate(self.stack)
                      if i not in removed],
                     selection)

    def drop_below(self):
        '''
        Remove every entry below the selection.
        '''
        if self.selection is None:
            logger.debug('no selection to drop below')
            return
        self.drop(range(self.selection))

    def dup(self):
        '''
        Push a copy of the selected-or-top entry.
        '''
        index = self._target()
        if index < 0:
            raise StackUnderflow()
        self._commit(self.stack + (self.stack[index],), self.selection)

    def swap(self):
        '''
        Exchange the selected-or-top entry and the one below it.
        '''
        index = self._target()
        if index < 1:
            raise StackUnderflow('swap needs 2 entries')
        stack = list(self.stack)
        stack[index - 1], stack[index] = stack[index], stack[index - 1]
        self._commit(stack, self.selection)

    def clear(self):
        '''
        Remove everything from the stack.
        '''
        if not self.stack:
            logger.debug('stack already empty')
            return
        self._commit(())

    # Selection

    def select(self, index):
        '''
        Select an entry by index, or nothing with None.
        '''
        if index is not None and not self._valid(index):
            logger.debug('no entry %d to select', index)
            return
        self.selection = index

    def move_selection(self, delta):
        '''
        Move the selection by delta entries, toward the top when positive.

        Moving up from no selection starts from past the top; moving past
        the top deselects.
        '''
        if not self.stack:
            logger.debug('nothing to select')
            return
        if self.selection is None:
            if delta >= 0:
                logger.debug('no selection to move up')
                return
            self.selection = max(len(self.stack) + delta, 0)
            return
        index = self.selection + delta
        if index >= len(self.stack):
            self.selection = None
        else:
            self.selection = max(index, 0)

    def move_entry(self, delta):
        '''
        Move the selected-or-top entry by delta places; the selection
        follows it.
        '''
        index = self._target()
        if index < 0:
            logger.debug('nothing to move')
            return
        destination = min(max(index + delta, 0), len(self.stack) - 1)
        if destination == index:
            logger.debug('entry %d already at the end', index)
            return
        stack = list(self.stack)
        stack.insert(destination, stack.pop(index))
        self._commit(stack,
                     None if self.selection is None else destination)

    # Display

    def toggle_display_mode(self, index=None):
        '''
        Switch an entry between exact and approximate display.
        '''
        if index is None:
            index = self._target()
        if not self._valid(index):
            logger.debug('no entry %d to toggle', index)
            return
        stack = list(self.stack)
        stack[index] = stack[index]._replace(approx=not stack[index].approx)
        self._commit(stack, self.selection)

    def set_entry_radix(self, radix, index=None):
        '''
        Display one entry in its own radix; None follows the machine's.
        '''
        if index is None:
            index = self._target()
        if radix is not None:
            radix = check_radix(radix)
        if not self._valid(index):
            logger.debug('no entry %d to set radix on', index)
            return
        stack = list(self.stack)
        stack[index] = stack[index]._replace(radix=radix)
        self._commit(stack, self.selection)

    def render(self, index=None, radix=None):
        '''
        Render an entry as text, in its display mode.

        The entry's own radix wins over ``radix``, which defaults to the
        machine's; an entry in another radix than that gets an ``abbv#``
        prefix. Approximate renders that cannot be computed fall back to
        exact.
        '''
        if index is None:
            index = self._target()
        if not self._valid(index):
            raise StackUnderflow('no entry {}'.format(index))
        entry = self.stack[index]
        active = self.config.radix if radix is None else check_radix(radix)
        shown = active if entry.radix is None else entry.radix
        prefix = '' if shown == active else radix_name(shown) + '#'
        if entry.approx:
            try:
                return prefix + render(entry.expr, shown, True,
                                       self.config.precision)
            except GuacError as e:
                logger.debug('approximation failed: %s', e)
        return prefix + render(entry.expr, shown)

    def render_stack(self, radix=None):
        '''
        Render all entries, bottom first.
        '''
        return [self.render(i, radix) for i in range(len(self.stack))]

    # History

    def _restore(self, snapshot):
        self.stack = snapshot
        if self.selection is not None and not self._valid(self.selection):
            self.selection = None

    def undo(self):
        snapshot = self.history.undo()
        if snapshot is None:
            logger.debug('nothing to undo')
            return
        self._restore(snapshot)

    def redo(self):
        snapshot = self.history.redo()
        if snapshot is None:
            logger.debug('nothing to redo')
            return
        self._restore(snapshot)

    # Configuration

    @wrap_user_errors('Bad radix {1!r}')
    def set_radix(self, radix):
        '''
        Set the default radix, given as a number or a name like ``hex``.
        '''
        if isinstance(radix, str):
            radix = parse_radix(radix)
        self.config.radix = check_radix(radix)

    @wrap_user_errors('Bad precision {1!r}')
    def set_precision(self, precision):
        self.config.precision = check_precision(precision)

    def set_angle_measure(self, measure):
        self.config.angle_measure = check_angle_measure(measure)

    # Language mapping to stack operations, by lexeme.

    COMMANDS = {
        'drop': drop,
        'dup': dup,
        'swap': swap,
        'clear': clear,
        'undo': undo,
        'redo': redo,
        'approx': toggle_display_mode,
        ';': toggle_display_mode,
        '<': partial(move_entry, delta=-1),
        '>': partial(move_entry, delta=1),
        '[': partial(move_selection, delta=-1),
        ']': partial(move_selection, delta=1),
    }

    def feed(self, groups):
        '''
        Push or run one lexeme.

        :param groups: Matched groups of the lexeme, from the lexer.
        '''
        if 'str' in groups:
            self.push_variable(groups.get('__str__', ''))
        elif 'number' in groups:
            self.push_input(groups['number'])
        else:
            word = groups.get('name') or groups.get('operator')
            if word in type(self).COMMANDS:
                type(self).COMMANDS[word](self)
            elif word in ops.OPERATORS:
                self.apply(word)
            else:
                self.push_input(word)
