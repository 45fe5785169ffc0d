"""Command layer and interactive loop for the calculator.

A line starting with '/' is a command, a line containing '=' is an
assignment, anything else is an expression whose value is printed.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory, History, InMemoryHistory

from .config import Settings
from .converter import parse_and_convert
from .environment import Environment
from .errors import (
    CalculatorError,
    DivisionByZeroError,
    EmptyExpressionError,
    InvalidIdentifierError,
    UnknownVariableError,
)
from .evaluator import evaluate, stringify
from .lexer import is_identifier

logger = logging.getLogger(__name__)

BANNER = (
    "+-+-+   Welcome to Smart Calculator   */*/*\n"
    "Enter a command or start calculation or type '/help'"
)

HELP_TEXT = """Smart calculator commands:
/clear	clears all variables
/vars	prints variables
/del	deletes variables (space separated)
/con	converts infix to postfix notation
/read	reads given file and updates variables
/write	writes variables to given file
/history	shows recent input history
/help	prints help
/exit	exits program

Smart calculator operations:
(   )   +   -   *   /   %   ^

Smart calculator supports only Latin characters for variables
Smart calculator supports only integers for numerical types."""

HISTORY_LIMIT = 50


def format_error(err: CalculatorError, context: str) -> str:
    """Render an error for the user; context is 'expression' or 'assignment'."""
    if isinstance(err, InvalidIdentifierError):
        return "Invalid identifier"
    if isinstance(err, UnknownVariableError):
        return "Unknown variable"
    if isinstance(err, DivisionByZeroError):
        return "Division by zero"
    return f"Invalid {context}"


class Calculator:
    """One calculator session: a variable environment plus command handling."""

    def __init__(self, settings: Optional[Settings] = None, env: Optional[Environment] = None):
        self.settings = settings if settings is not None else Settings(history_enabled=False)
        self.env = env if env is not None else Environment()
        self._commands: Dict[str, Callable[[str], Optional[str]]] = {
            'help': self._cmd_help,
            'vars': self._cmd_vars,
            'clear': self._cmd_clear,
            'del': self._cmd_del,
            'con': self._cmd_con,
            'read': self._cmd_read,
            'write': self._cmd_write,
            'history': self._cmd_history,
        }

    # ----- line handling -----

    def handle_line(self, line: str) -> Optional[str]:
        """Process one line and return the text to print, or None.

        Raises EOFError for /exit so the caller can end the session.
        """
        text = line.strip()
        if not text:
            return None
        if text.startswith('/'):
            return self._process_command(text[1:])
        return self._evaluate_line(text)

    def _evaluate_line(self, text: str) -> Optional[str]:
        """Handle an assignment or an expression; commands are not recognised here."""
        if '=' in text:
            return self._assign(text)
        return self._expression(text)

    def _expression(self, text: str) -> Optional[str]:
        try:
            return str(evaluate(parse_and_convert(text, self.env)))
        except EmptyExpressionError:
            return None
        except CalculatorError as e:
            logger.debug("expression %r failed: %s", text, e)
            return format_error(e, 'expression')

    def assign(self, target: str, source: str) -> int:
        """Evaluate source and bind it to target; the environment is untouched on error."""
        if not is_identifier(target):
            raise InvalidIdentifierError(f"Invalid identifier: {target!r}")
        value = evaluate(parse_and_convert(source, self.env))
        self.env.assign(target, value)
        return value

    def _assign(self, text: str) -> Optional[str]:
        target, source = (part.strip() for part in text.split('=', 1))
        try:
            self.assign(target, source)
        except CalculatorError as e:
            logger.debug("assignment %r failed: %s", text, e)
            return format_error(e, 'assignment')
        return None

    # ----- commands -----

    def _process_command(self, body: str) -> Optional[str]:
        parts = body.split(None, 1)
        if not parts:
            return "Unknown command"
        cmd = parts[0]
        arg = parts[1].strip() if len(parts) > 1 else ''
        if cmd == 'exit':
            raise EOFError()
        handler = self._commands.get(cmd)
        if handler is None:
            return "Unknown command"
        return handler(arg)

    def _cmd_help(self, arg: str) -> str:
        return HELP_TEXT

    def _format_vars(self) -> List[str]:
        return [f"{name} = {value}" for name, value in self.env.items()]

    def _cmd_vars(self, arg: str) -> Optional[str]:
        lines = self._format_vars()
        return "\n".join(lines) if lines else None

    def _cmd_clear(self, arg: str) -> None:
        self.env.clear()

    def _cmd_del(self, arg: str) -> None:
        if arg:
            self.env.delete(arg.split())

    def _cmd_con(self, arg: str) -> Optional[str]:
        if not arg:
            return None
        try:
            expression = parse_and_convert(arg, self.env)
        except CalculatorError as e:
            return format_error(e, 'expression')
        if not expression:
            return "Empty expression"
        return stringify(expression)

    def _cmd_read(self, arg: str) -> Optional[str]:
        if not arg:
            return None
        try:
            with open(arg, 'r', encoding='utf-8') as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("could not read %s: %s", arg, e)
            return f"Could not read {arg}: {e}"
        # File lines are assignments or expressions; commands are not run.
        outputs = []
        for line in lines:
            text = line.strip()
            if not text:
                continue
            out = self._evaluate_line(text)
            if out is not None:
                outputs.append(out)
        return "\n".join(outputs) if outputs else None

    def _cmd_write(self, arg: str) -> Optional[str]:
        if not arg:
            return None
        try:
            with open(arg, 'w', encoding='utf-8') as f:
                for line in self._format_vars():
                    f.write(line + "\n")
        except OSError as e:
            logger.warning("could not write %s: %s", arg, e)
            return f"Could not write {arg}: {e}"
        return None

    def _cmd_history(self, arg: str) -> str:
        if not self.settings.history_enabled:
            return "History is disabled"
        # load_history_strings yields newest first
        entries = list(FileHistory(self.settings.history_file).load_history_strings())
        if not entries:
            return "(no history)"
        return "\n".join(reversed(entries[:HISTORY_LIMIT]))

    # ----- interactive loop -----

    def _history(self) -> History:
        if self.settings.history_enabled:
            return FileHistory(self.settings.history_file)
        return InMemoryHistory()

    def _completer(self) -> WordCompleter:
        words = ['/' + cmd for cmd in self._commands] + ['/exit'] + list(self.env)
        return WordCompleter(words, WORD=True)

    def run(self) -> None:
        """Interactive loop; Ctrl-C clears the line, Ctrl-D or /exit quits."""
        print(BANNER)
        session: PromptSession = PromptSession(history=self._history())
        while True:
            try:
                line = session.prompt(self.settings.prompt, completer=self._completer())
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            try:
                out = self.handle_line(line)
            except EOFError:
                break
            if out is not None:
                print(out)
        print("Bye!")
