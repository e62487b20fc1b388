"""
Catalog App - Product Catalog Editor Core

The editing core of a single-entity product catalog: an in-memory product
store, a browse/add/edit state machine coordinating selection and a decoupled
edit buffer, and the action gate exposing the five editor actions.
"""

__version__ = "0.1.0"
__author__ = "Catalog Team"
