"""HTTP API for buildcalc."""
