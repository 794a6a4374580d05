"""
seafood_scorer.pipeline — End-to-end assessment of a parsed label.

Modules:
  assess     — assess_label(): resolve, score, recommend, estimate CO2.
  enrichment — async fan-out over injected live-data fetchers, merged
               fulfilled-or-absent into assess_label().
"""
