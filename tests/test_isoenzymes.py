from f2ecm.network import (normalize_directions, get_non_exchange_rxns, convert_to_irreversible,
                           expand_isoenzymes, sort_identifiers)
from f2ecm.network.isoenzymes import get_base_rid

from conftest import dense


def test_expand_isoenzymes(toy_network):
    expanded = expand_isoenzymes(toy_network)
    assert expanded == {'R1': ['R1_EXP_1', 'R1_EXP_2']}
    assert toy_network.rxns == ['R1_EXP_1', 'R1_EXP_2', 'R2']
    assert toy_network.gr_rules == ['G1', 'G2', '']
    assert dense(toy_network.rxn_gene_mat).tolist() == [[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]]
    assert toy_network.get_stoic(1) == {'A': -1.0, 'B': 1.0}


def test_expand_isoenzyme_complexes(core_network):
    expand_isoenzymes(core_network)
    idx = core_network.rxns.index('PFK_EXP_1')
    assert core_network.gr_rules[idx] == '(b5 and b6)'
    assert core_network.get_rxn_genes(idx) == ['b5', 'b6']
    assert core_network.gr_rules[idx + 1] == 'b7'


def test_expand_without_isoenzymes(toy_network):
    toy_network.set_gr_rule(0, 'G1 and G2')
    assert expand_isoenzymes(toy_network) == {}
    assert toy_network.rxns == ['R1', 'R2']


def test_get_base_rid():
    assert get_base_rid('R1_REV_EXP_2') == 'R1'
    assert get_base_rid('R1_EXP_12') == 'R1'
    assert get_base_rid('R_REVERSE') == 'R_REVERSE'


def test_sort_identifiers(core_network):
    normalize_directions(core_network)
    convert_to_irreversible(core_network, get_non_exchange_rxns(core_network))
    expand_isoenzymes(core_network)
    assert core_network.rxns[-3:] == ['GLCpts_REV', 'PGI_REV_EXP_1', 'PGI_REV_EXP_2']

    sort_identifiers(core_network)
    assert core_network.rxns == ['EX_glc', 'GLCpts', 'GLCpts_REV', 'PGI_EXP_1', 'PGI_EXP_2',
                                 'PGI_REV_EXP_1', 'PGI_REV_EXP_2', 'PFK_EXP_1', 'PFK_EXP_2', 'FBA', 'BIOMASS']
    idx = core_network.rxns.index('PGI_REV_EXP_2')
    assert core_network.gr_rules[idx] == 'b4'
    assert core_network.get_stoic(idx) == {'g6p_c': 1.0, 'f6p_c': -1.0}
