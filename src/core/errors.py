"""Funclab exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class FunclabError(Exception):
    """Base exception for all Funclab failures."""


class FunclabConfigError(FunclabError):
    """Raised for invalid runtime configuration."""


class FunclabValueError(FunclabError):
    """Raised for invalid argument values and empty optional access."""


class FunclabPipelineError(FunclabError):
    """Raised for pipeline execution failures."""


class PipelineStageError(FunclabPipelineError):
    """Raised when a caller-supplied stage function fails mid-pass.

    Attributes:
        stage: Failing stage name (filter, transform, consume).
        index: Zero-based position of the element being processed.
    """

    def __init__(self, stage: str, index: int, message: str) -> None:
        super().__init__(message)
        self.stage = stage
        self.index = index
