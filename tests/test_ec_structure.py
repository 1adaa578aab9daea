import numpy as np
import pytest
from scipy import sparse

from f2ecm import FullEcStructure, LightEcStructure, build_ec_structure, InternalConsistencyError


def test_full_structure_entries(core_network):
    ec = build_ec_structure(core_network, gecko_light=False)
    assert isinstance(ec, FullEcStructure)
    assert ec.mode == 'full'
    assert ec.rxns == ['GLCpts', 'PGI', 'PFK', 'FBA', 'BIOMASS']
    assert np.all(ec.kcat == 0.0)
    assert ec.source == [''] * 5
    assert np.all(np.isnan(ec.df_entries['conc']))
    assert ec.rxn_enz_mat.shape == (5, 0)


def test_light_structure_entries(core_network):
    ec = build_ec_structure(core_network, gecko_light=True)
    assert isinstance(ec, LightEcStructure)
    assert ec.mode == 'light'
    assert ec.rxns == ['GLCpts', 'PGI', 'PGI', 'PFK', 'PFK', 'FBA', 'BIOMASS']
    assert list(ec.isozymes) == [1, 1, 2, 1, 2, 1, 1]
    assert ec.entry_ids[:3] == ['001_GLCpts', '001_PGI', '002_PGI']
    ec.check_consistency()


def test_light_entry_ids_widen_beyond_999():
    n_isozymes = 1200
    ec = LightEcStructure(['R1'] * n_isozymes, range(1, n_isozymes + 1))
    entry_ids = ec.entry_ids
    assert entry_ids[0] == '0001_R1'
    assert entry_ids[-1] == '1200_R1'
    assert len(set(entry_ids)) == n_isozymes
    ec.check_consistency()


def test_set_enzymes():
    ec = FullEcStructure(['R1', 'R2'])
    ec.set_enzymes(['G1', 'G2'], ['P1', 'P2'], [1000.0, 2000.0], ['MA', 'MAA'])
    assert ec.n_enzymes == 2
    assert ec.genes == ['G1', 'G2']
    assert ec.enzymes == ['P1', 'P2']
    assert list(ec.mw) == [1000.0, 2000.0]
    assert np.all(np.isnan(ec.concs))
    assert ec.rxn_enz_mat.shape == (2, 2)
    ec.check_consistency()


def test_inconsistent_matrix_shape():
    ec = FullEcStructure(['R1', 'R2'])
    ec.set_enzymes(['G1'], ['P1'], [1000.0], ['MA'])
    ec.rxn_enz_mat = sparse.csr_matrix((3, 1), dtype=int)
    with pytest.raises(InternalConsistencyError):
        ec.check_consistency()


def test_duplicate_reactions_in_full_structure():
    with pytest.raises(InternalConsistencyError):
        FullEcStructure(['R1', 'R1']).check_consistency()


def test_isozyme_ordinals_out_of_sequence():
    with pytest.raises(InternalConsistencyError):
        LightEcStructure(['R1', 'R1', 'R2'], [1, 3, 1]).check_consistency()


def test_entry_genes():
    isozymes = [['G1', 'G2'], ['G3']]
    full = FullEcStructure(['R1'])
    assert full.get_entry_genes(0, isozymes) == ['G1', 'G2', 'G3']
    light = LightEcStructure(['R1', 'R1'], [1, 2])
    assert light.get_entry_genes(0, isozymes) == ['G1', 'G2']
    assert light.get_entry_genes(1, isozymes) == ['G3']
