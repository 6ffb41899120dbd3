"""Failure types raised by the genealogy pipeline."""
from __future__ import annotations


class GenealogyError(Exception):
    """Base class for every fatal pipeline failure."""

    stage = "genealogy"

    def describe(self) -> str:
        return f"Error: {self}"


class ConfigError(GenealogyError):
    stage = "config"


class PopulationError(GenealogyError):
    """A population source ran short or held a malformed line."""

    stage = "population"

    def __init__(self, line: int, content: str):
        super().__init__(f"line {line}: {content}")
        self.line = line
        self.content = content

    def describe(self) -> str:
        return f"Error on line {self.line}: {self.content}"


class SpanningError(GenealogyError):
    stage = "spanning"

    def __init__(self, message: str = "Cannot relate entire population."):
        super().__init__(message)


class ConvergenceError(GenealogyError):
    stage = "rooting"

    def __init__(self, message: str = "The genealogy did not converge."):
        super().__init__(message)
