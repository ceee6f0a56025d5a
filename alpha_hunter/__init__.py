"""
Alpha Hunter - Project Discovery Pipeline
=========================================
A staged pipeline that turns messy, multilingual project spreadsheets
into a ranked shortlist:
  Stage 1: Parsing (tokenize, resolve headers, build records)
  Stage 2: Cleaning (URL / category normalization)
  Stage 3: Alpha Hunting Filters (score, launch status, category)
  Stage 4: Priority Scoring (weighted, stable ranking)
  Stage 5: Aggregation (summary statistics and distributions)
  Stage 6: Verification (LLM legitimacy check, on demand)
"""

__version__ = "1.0.0"
__author__ = "Alpha Hunter Team"
