"""Subpackage with Uniprot protein data."""

from .uniprot_data import UniprotData
from .uniprot_protein import UniprotProtein

__all__ = ['UniprotData', 'UniprotProtein']
