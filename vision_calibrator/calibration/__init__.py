"""
Calibration engine: turns visual conditions into editor display settings.

Modules
-------
engine       : calculate_recommendations() + detect_conditions()
               + recommendation_summary() — pure functions, no I/O.
tables       : Font list, color-vision theme table, citation constants.
prescription : parse_decimal() + parse_prescription() for free-text input.
"""
