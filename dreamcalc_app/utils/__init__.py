"""
Utility functions module.

Display helpers shared by the coordinator, scripts and examples.

Rounding Semantics:
- The finance engine works on raw floats and never rounds
- Rounding happens only when a value is shown to a reader
- Halves always round up, matching how amounts are read aloud
"""
