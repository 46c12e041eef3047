"""
Core domain models, notation parser and contracts for floral formulae.

This module contains the foundational building blocks that are independent
of any record store or user interface (CLI, explain text).
"""
