"""
seafood_scorer.reporting — Terminal formatting for CLI output.

It does NOT compute anything; every formatter takes already-built models
(breakdowns, alternatives, search hits, assessments) and renders text.

Modules:
  formatters — ASCII formatters used by the Typer CLI commands.
"""
