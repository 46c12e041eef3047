"""
Explain renderer: English prose for a parsed floral formula.
"""

from .explainer import (
    ExplainConfig,
    FormulaExplainer,
    explain_adnation,
    explain_floral_part,
    explain_flower_type,
    explain_formula,
    explain_fruit,
    explain_number,
    explain_ovary,
    explain_part,
    explain_symmetry,
    explain_whorl,
)

__all__ = [
    "ExplainConfig",
    "FormulaExplainer",
    "explain_formula",
    "explain_symmetry",
    "explain_number",
    "explain_whorl",
    "explain_floral_part",
    "explain_part",
    "explain_ovary",
    "explain_fruit",
    "explain_flower_type",
    "explain_adnation",
]
