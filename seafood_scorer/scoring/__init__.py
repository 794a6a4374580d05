"""
Sustainability scoring: pure signal scorers and the score engine.

Modules
-------
iucn    : IUCN status → base score (0–50).
methods : fishing method key / EU gear code / free text → modifier.
areas   : FAO area code (hierarchical fallback) → modifier + display name.
origin  : certifications + production method → clamped modifier.
bands   : score → band, band labels and colours.
engine  : compute_score() — combines the above into a ScoreBreakdown.
co2     : carbon footprint estimate with fallback tables.
"""
