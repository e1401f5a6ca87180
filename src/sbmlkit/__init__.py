"""
SBML Kit

A small, pure-Python object model for SBML (Systems Biology Markup Language)
elements, with the assertion helpers its test suite is written against.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - XML parsing or writing
    - Consistency validation
    - Simulation semantics

This package defines ELEMENT STRUCTURE and ACCESSORS only.

Reading and writing documents happens in external layers.
"""

__version__ = "0.1.0"
