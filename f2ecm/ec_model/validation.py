"""Checks on a network before conversion to an enzyme constraint model.

Fatal conditions raise PreconditionError before the network is modified.
Gene product associations with potentially problematic nesting only
result in a warning.
"""

import re
import warnings

import f2ecm.prefixes as pf
from ..network.gpr import parse_gpr
from ..network.network import check_cobra_format
from ..exceptions import PreconditionError

AMBIGUOUS_PATTERNS = [') and (', ') and', 'and (']


def check_import_format(network):
    """Check that the network was not created from a COBRA toolbox style model.

    COBRA toolbox models carry 'rules' and 'modelID' fields, their
    rules refer to genes by index, e.g. 'x(1) | x(2)'.

    :param network: metabolic network
    :type network: Network
    :raises PreconditionError: if network seems to be in COBRA toolbox format
    """
    check_cobra_format(network.rxns, network.gr_rules, network.model_attrs)


def check_reserved_ids(network):
    """Check that network ids do not collide with reserved ids.

    Metabolite ids must not start with 'prot_', reaction ids must not start
    with 'usage_prot_' or 'prot_pool' or end with '_REV' or '_EXP_<n>'.
    Such ids indicate a network that has already been converted.

    :param network: metabolic network
    :type network: Network
    :raises PreconditionError: if reserved ids are used
    """
    conflict_mets = [sid for sid in network.mets if sid.startswith(pf.M_prot)]
    if len(conflict_mets) > 0:
        raise PreconditionError(f'Metabolite ids are not allowed to start with "{pf.M_prot}": '
                                f'{conflict_mets[:10]}')
    conflict_rxns = [rid for rid in network.rxns
                     if rid.startswith(pf.R_usage_prot) or rid.startswith(pf.R_prot_pool)
                     or rid.endswith(pf.REV) or re.search(rf'{pf.EXP}\d+$', rid)]
    if len(conflict_rxns) > 0:
        raise PreconditionError(f'Reaction ids are not allowed to start with "{pf.R_usage_prot}" or '
                                f'"{pf.R_prot_pool}", or end with "{pf.REV}" or "{pf.EXP}<n>": '
                                f'{conflict_rxns[:10]}')


def check_gprs(network):
    """Parse all gene product associations.

    :param network: metabolic network
    :type network: Network
    :raises GprSyntaxError: for gene product associations that can not be parsed
    """
    for gpr in network.gr_rules:
        parse_gpr(gpr)


def find_ambiguous_gprs(network):
    """Find gene product associations with potentially problematic nesting.

    I.e. associations containing ') and (', ') and' or 'and ('.

    :param network: metabolic network
    :type network: Network
    :return: reaction indices
    :rtype: list of int
    """
    return [idx for idx, gpr in enumerate(network.gr_rules)
            if any(pattern in gpr for pattern in AMBIGUOUS_PATTERNS)]


def warn_ambiguous_gprs(network):
    """Issue a warning per gene product association with potentially problematic nesting.

    :param network: metabolic network
    :type network: Network
    :return: ids of reactions with ambiguous gene product associations
    :rtype: list of str
    """
    idxs = find_ambiguous_gprs(network)
    for idx in idxs:
        warnings.warn(f'Potentially problematic ") and (", ") and" or "and (" relationship in gene product '
                      f'association of {network.rxns[idx]}: {network.gr_rules[idx]}\n'
                      f'This kind of relationship should only be present in reactions catalyzed by complexes '
                      f'of isoenzymes, e.g. "(G1 or G2) and (G3 or G4)". For these cases modify the gene '
                      f'product association manually, writing all possible combinations, e.g. '
                      f'"(G1 and G3) or (G1 and G4) or (G2 and G3) or (G2 and G4)". Otherwise, isoenzymes '
                      f'are determined by splitting the association at each "or", ignoring brackets.',
                      UserWarning)
    return [network.rxns[idx] for idx in idxs]
