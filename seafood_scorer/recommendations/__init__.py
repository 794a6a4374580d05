"""
Recommendation engine: better-option suggestions for a scored product.

Modules
-------
alternatives : build_alternatives() — same-species better-practice and
               cross-species substitutes, plus reduce_consumption_message().
"""
