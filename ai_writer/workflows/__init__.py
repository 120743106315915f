"""Workflows for the AI Writer."""

from .writing import WritingWorkflow, create_writing_workflow

__all__ = ["WritingWorkflow", "create_writing_workflow"]
