"""Subpackage for conversion of a metabolic network to an enzyme constraint model."""

from .ec_model import EcModel, make_ec_model
from .ec_structure import EcStructure, FullEcStructure, LightEcStructure, build_ec_structure

__all__ = ['EcModel', 'make_ec_model', 'EcStructure', 'FullEcStructure', 'LightEcStructure',
           'build_ec_structure']
