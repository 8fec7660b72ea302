"""Service layer for buildcalc."""
