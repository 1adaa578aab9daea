"""
f2ecm package
=============

Package supporting extension of genome-scale metabolic networks
with enzyme constraint structures (GECKO, GECKO light).
"""

from ._version import __version__
from .network import *
from .ec_model import *
from .uniprot import *
from .model_adapter import ModelAdapter
from .exceptions import PreconditionError, InternalConsistencyError, GprSyntaxError

from . import network
from . import ec_model
from . import uniprot


__all__ = ['ModelAdapter', 'PreconditionError', 'InternalConsistencyError', 'GprSyntaxError']
__all__ += network.__all__
__all__ += ec_model.__all__
__all__ += uniprot.__all__
