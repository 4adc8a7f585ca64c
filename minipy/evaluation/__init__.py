"""Evaluation of minipy expressions and commands.

`Evaluator` turns expression text into values; `CommandDispatcher` routes
whole command lines to their handlers.
"""

from minipy.evaluation.evaluator import Evaluator
from minipy.evaluation.commands import CommandDispatcher, CommandKind, classify

__all__ = ["Evaluator", "CommandDispatcher", "CommandKind", "classify"]
