"""
Scoring core: the credit score formula and the risk threshold.

Modules
-------
engine     : compute_score() + NullInputError — clamping, weighting, rounding.
classifier : is_high_risk() + risk_label() — the two-tier threshold.

Both are pure functions with no I/O, no logging, and no configuration.
"""
