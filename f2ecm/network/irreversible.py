"""Reaction direction normalization and splitting of reversible reactions.

Reactions only carrying negative flux get inverted, reversibility flags get
corrected according to flux bounds and reversible reactions get split into
irreversible forward/reverse reactions. Reverse reactions get the id of the
forward reaction with postfix '_REV'.

f2ecm developers, August 2026
"""

import numpy as np

import f2ecm.prefixes as pf


def remove_pseudoreaction_gprs(network):
    """Remove gene product associations from pseudoreactions.

    Pseudoreactions, e.g. biomass reactions, are identified by their name
    ending with ' pseudoreaction'. These are not catalyzed by enzymes.

    :param network: metabolic network
    :type network: Network
    :return: ids of reactions with removed gene product associations
    :rtype: list of str
    """
    idxs = [idx for idx, name in enumerate(network.rxn_names)
            if name.endswith(pf.PSEUDOREACTION) and len(network.gr_rules[idx]) > 0]
    network.set_gr_rules({idx: '' for idx in idxs})
    rids = [network.rxns[idx] for idx in idxs]
    if len(rids) > 0:
        print(f'{len(rids):4d} gene product associations removed from pseudoreactions')
    return rids


def normalize_directions(network):
    """Invert reactions defined to carry negative flux only and correct reversibility.

    For reactions with lb < 0 and ub == 0 the stoichiometric column is negated
    and flux bounds are inverted to [0, -lb].
    Reactions are reversible if lb < 0 < ub, exchange reactions
    (a single metabolite) are always considered reversible.

    :param network: metabolic network
    :type network: Network
    :return: ids of inverted reactions
    :rtype: list of str
    """
    if len(network.lb) != len(network.ub) or len(network.lb) != len(network.rxns):
        raise ValueError(f'flux bounds ({len(network.lb)}, {len(network.ub)}) do not match '
                         f'{len(network.rxns)} reactions')
    to_swap = (network.lb < 0.0) & (network.ub == 0.0)
    network.negate_rxns(to_swap)
    network.ub[to_swap] = -network.lb[to_swap]
    network.lb[to_swap] = 0.0

    network.rev = ((network.lb < 0.0) & (network.ub > 0.0)) | (network.get_n_coefficients() == 1)
    return [rid for rid, swap in zip(network.rxns, to_swap) if swap]


def get_non_exchange_rxns(network):
    """Reaction ids of non-exchange reactions.

    :param network: metabolic network
    :type network: Network
    :return: reaction ids
    :rtype: list of str
    """
    exchange_idxs = set(network.get_exchange_rxn_idxs())
    return [rid for idx, rid in enumerate(network.rxns) if idx not in exchange_idxs]


def convert_to_irreversible(network, rids):
    """Split reversible reactions into irreversible forward and reverse reactions.

    Only reversible reactions in rids get split. Reverse reactions
    get appended in original order after all existing reactions.
    Reverse reactions have an inverted stoichiometric column, flux bounds
    [0, -lb] and the gene product association of the forward reaction.
    Forward reactions get flux bounds [0, ub].

    :param network: metabolic network with corrected reversibility flags
    :type network: Network
    :param rids: reaction ids to split, if reversible
    :type rids: list of str
    :return: ids of created reverse reactions
    :rtype: list of str
    """
    rid2idx = {rid: idx for idx, rid in enumerate(network.rxns)}
    split_idxs = [rid2idx[rid] for rid in rids if network.rev[rid2idx[rid]]]
    if len(split_idxs) == 0:
        return []

    n_rxns = len(network.rxns)
    rev_rids = [f'{network.rxns[idx]}{pf.REV}' for idx in split_idxs]
    orig_lb = network.lb[split_idxs].copy()
    network.reorder_rxns(list(range(n_rxns)) + split_idxs, network.rxns + rev_rids)

    new_idxs = np.arange(n_rxns, n_rxns + len(split_idxs))
    mask = np.zeros(len(network.rxns), dtype=bool)
    mask[new_idxs] = True
    network.negate_rxns(mask)
    network.lb[split_idxs] = 0.0
    network.lb[new_idxs] = 0.0
    network.ub[new_idxs] = -orig_lb
    network.rev[split_idxs] = False
    network.rev[new_idxs] = False
    for idx in new_idxs:
        network.rxn_names[idx] += ' (reversible)'

    print(f'{len(rev_rids):4d} reversible reactions split into forward/reverse reactions')
    return rev_rids
