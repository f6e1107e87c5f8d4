# finite_dinaturals/constants.py
"""
Finite Dinaturals Constants

This module defines constants used throughout the search:

RUN CONFIGURATION
- DEFAULT_N: Size of the finite set every function acts on

RENDERING
- CHAIN_SEPARATOR: Separator between functions of a diagrammatic-order chain
- SECTION_RULE: Underline for headers of the diagnostic dump

PROCESS
- FAILURE_EXIT_CODE: Exit status when a hexagon counterexample is found
"""


# =============================================================================
# RUN CONFIGURATION
# =============================================================================

# All functions of a run are endofunctions on {0, ..., n-1}.
# Search cost grows like n^(4n) for squares alone, so keep this small.
DEFAULT_N = 2

assert DEFAULT_N >= 1, "Finite set size must be at least 1"


# =============================================================================
# RENDERING
# =============================================================================

CHAIN_SEPARATOR = " ; "
SECTION_RULE = "------------------"


# =============================================================================
# PROCESS
# =============================================================================

FAILURE_EXIT_CODE = 1
