import numpy as np

from f2ecm.network import (remove_pseudoreaction_gprs, normalize_directions, get_non_exchange_rxns,
                           convert_to_irreversible)


def test_remove_pseudoreaction_gprs(core_network):
    rids = remove_pseudoreaction_gprs(core_network)
    assert rids == ['BIOMASS']
    assert core_network.gr_rules[5] == ''
    assert core_network.get_rxn_genes(5) == []
    assert core_network.get_rxn_genes(4) == ['b8']


def test_normalize_directions(core_network):
    inverted = normalize_directions(core_network)
    assert inverted == ['FBA']
    assert core_network.get_stoic(4) == {'fdp_c': 1.0, 'dhap_c': -1.0}
    assert (core_network.lb[4], core_network.ub[4]) == (0.0, 1000.0)
    # exchange reactions are always reversible
    assert list(core_network.rev) == [True, True, True, False, False, False]


def test_non_exchange_rxns(core_network):
    assert get_non_exchange_rxns(core_network) == ['GLCpts', 'PGI', 'PFK', 'FBA', 'BIOMASS']


def test_convert_to_irreversible(core_network):
    normalize_directions(core_network)
    rev_rids = convert_to_irreversible(core_network, get_non_exchange_rxns(core_network))

    assert rev_rids == ['GLCpts_REV', 'PGI_REV']
    assert core_network.rxns == ['EX_glc', 'GLCpts', 'PGI', 'PFK', 'FBA', 'BIOMASS', 'GLCpts_REV', 'PGI_REV']
    assert core_network.get_stoic(6) == {'glc_e': 1.0, 'g6p_c': -1.0}
    assert core_network.gr_rules[7] == 'b3 or b4'
    assert core_network.get_rxn_genes(7) == ['b3', 'b4']
    assert core_network.rxn_names[6] == 'glucose transport (reversible)'
    assert list(core_network.lb) == [-10.0] + [0.0] * 7
    assert list(core_network.ub) == [1000.0] * 8
    assert not any(core_network.rev[1:])
    # exchange reaction is kept reversible
    assert core_network.rev[0]


def test_convert_to_irreversible_with_asymmetric_bounds(toy_network):
    toy_network.lb[0] = -50.0
    normalize_directions(toy_network)
    rev_rids = convert_to_irreversible(toy_network, ['R1', 'R2'])
    assert rev_rids == ['R1_REV']
    assert toy_network.lb[2] == 0.0
    assert toy_network.ub[2] == 50.0
    assert toy_network.ub[0] == 1000.0


def test_convert_to_irreversible_without_reversible_rxns(toy_network):
    normalize_directions(toy_network)
    assert convert_to_irreversible(toy_network, ['R1', 'R2']) == []
    assert toy_network.rxns == ['R1', 'R2']
    assert np.all(toy_network.lb == 0.0)
