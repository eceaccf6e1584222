"""Interpreter subsystem — render and publish the Solr interpreter setting."""

from zeppctl.interpreter.configurator import InterpreterConfigDocument, InterpreterConfigurator

__all__ = [
    "InterpreterConfigDocument",
    "InterpreterConfigurator",
]
