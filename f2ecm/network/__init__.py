"""Subpackage with metabolic network in matrix form and its transformations."""

from .network import Network
from .gpr import GprNode, parse_gpr, get_isozymes, isozyme_gpr
from .irreversible import (remove_pseudoreaction_gprs, normalize_directions, get_non_exchange_rxns,
                           convert_to_irreversible)
from .isoenzymes import expand_isoenzymes, sort_identifiers

__all__ = ['Network', 'GprNode', 'parse_gpr', 'get_isozymes', 'isozyme_gpr',
           'remove_pseudoreaction_gprs', 'normalize_directions', 'get_non_exchange_rxns',
           'convert_to_irreversible', 'expand_isoenzymes', 'sort_identifiers']
