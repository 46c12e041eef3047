"""
Test suite for floral-formula

Contains:
- tests/unit/          : Unit tests for the domain, notation parser,
                         contracts, record store, explain renderer and CLI
"""
