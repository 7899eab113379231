"""Prompt templates."""

from .lookup import COMMAND_PREFIX, build_lookup_prompt

__all__ = ["COMMAND_PREFIX", "build_lookup_prompt"]
