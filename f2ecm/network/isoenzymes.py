"""Expansion of reactions catalyzed by isoenzymes.

Reactions catalyzed by several isoenzymes (OR in the gene product association)
get replaced by one copy per isoenzyme, each with the gene product
association of a single enzyme (complex). Copies get the postfix '_EXP_<n>'.

f2ecm developers, August 2026
"""

import re

import f2ecm.prefixes as pf
from .gpr import get_isozymes, isozyme_gpr


def expand_isoenzymes(network):
    """Replace reactions catalyzed by isoenzymes by one reaction per isoenzyme.

    Copies take the position of the original reaction and have identical
    stoichiometry, flux bounds and reversibility.

    :param network: metabolic network
    :type network: Network
    :return: mapping of original reaction id to ids of reaction copies
    :rtype: dict (key: reaction id, val: list of str)
    """
    order = []
    new_rids = []
    new_gprs = []
    expanded = {}
    for idx, rid in enumerate(network.rxns):
        isozymes = get_isozymes(network.gr_rules[idx])
        if len(isozymes) > 1:
            expanded[rid] = []
            for iso_idx, genes in enumerate(isozymes):
                exp_rid = f'{rid}{pf.EXP}{iso_idx + 1}'
                order.append(idx)
                new_rids.append(exp_rid)
                new_gprs.append(isozyme_gpr(genes))
                expanded[rid].append(exp_rid)
        else:
            order.append(idx)
            new_rids.append(rid)
            new_gprs.append(None)

    if len(expanded) > 0:
        network.reorder_rxns(order, new_rids)
        network.set_gr_rules({idx: gpr for idx, gpr in enumerate(new_gprs) if gpr is not None})
        n_copies = sum(len(rids) for rids in expanded.values())
        print(f'{len(expanded):4d} reactions catalyzed by isoenzymes expanded into {n_copies} reactions')
    return expanded


def get_base_rid(rid):
    """Reaction id without isoenzyme and reverse postfixes.

    e.g. 'R1_REV_EXP_2' -> 'R1'

    :param rid: reaction id
    :type rid: str
    :return: base reaction id
    :rtype: str
    """
    base_rid = re.sub(rf'{pf.EXP}\d+$', '', rid)
    return re.sub(f'{pf.REV}$', '', base_rid)


def sort_identifiers(network):
    """Sort reactions so that split and expanded reactions are adjacent.

    Reactions sharing the same base reaction id get grouped at the position
    of the first reaction of the group. Within a group forward reactions
    precede reverse reactions, isoenzyme copies are sorted by index.
    The order of groups is retained.

    :param network: metabolic network
    :type network: Network
    """
    group_pos = {}
    sort_keys = []
    for idx, rid in enumerate(network.rxns):
        base_rid = get_base_rid(rid)
        if base_rid not in group_pos:
            group_pos[base_rid] = len(group_pos)
        m = re.search(rf'{pf.EXP}(\d+)$', rid)
        exp_idx = int(m.group(1)) if m else 0
        is_rev = re.sub(rf'{pf.EXP}\d+$', '', rid).endswith(pf.REV)
        sort_keys.append((group_pos[base_rid], is_rev, exp_idx, idx))
    order = [key[-1] for key in sorted(sort_keys)]
    if order != list(range(len(network.rxns))):
        network.reorder_rxns(order)
