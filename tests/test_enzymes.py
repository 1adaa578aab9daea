import numpy as np
import pandas as pd

from f2ecm import ModelAdapter, UniprotData, build_ec_structure
from f2ecm.ec_model.enzymes import resolve_enzymes, map_complexes

from conftest import make_uniprot_data, dense


def test_uniprot_lookup(core_uniprot):
    df = core_uniprot.lookup(['b1', 'b6', 'b8'])
    assert list(df['found']) == [True, False, True]
    assert df.at[0, 'enzyme'] == 'Q1'
    assert df.at[2, 'mw'] == 7000.0
    assert np.isnan(df.at[1, 'mw'])


def test_uniprot_protein_record():
    df_uniprot = pd.DataFrame([['P0A9B2', 'b1779', 35532.0, 'MTIKV', '1.2.1.12; 1.2.1.-']],
                              columns=['Entry', 'Gene Names (ordered locus)', 'Mass', 'Sequence', 'EC number'])
    p = UniprotData(df_uniprot).proteins['P0A9B2']
    assert p.loci == ['b1779']
    assert p.mass == 35532.0
    assert p.length == 5
    assert p.ec_numbers == ['1.2.1.12', '1.2.1.-']


def test_uniprot_first_protein_wins_for_shared_locus():
    uniprot_data = make_uniprot_data({'G1 G2': 'P1', 'G2; G3': 'P2'})
    assert uniprot_data.locus2uid == {'G1': 'P1', 'G2': 'P1', 'G3': 'P2'}
    assert uniprot_data.proteins['P2'].loci == ['G2', 'G3']


def test_resolve_enzymes(core_network, core_uniprot, adapter, capsys):
    ec = build_ec_structure(core_network)
    unresolved = resolve_enzymes(ec, core_network, adapter, core_uniprot)
    assert unresolved == ['b6', 'b9']
    assert 'Cannot find 2 of 9 genes in local Uniprot data' in capsys.readouterr().out
    assert ec.genes == ['b1', 'b2', 'b3', 'b4', 'b5', 'b7', 'b8']
    assert ec.enzymes == ['Q1', 'P2', 'P3', 'P4', 'P5', 'P7', 'A8']
    assert ec.sequence[0] == 'MA'
    assert ec.rxn_enz_mat.shape == (5, 7)


def test_resolve_enzymes_with_gene_substitution(toy_network):
    adapter = ModelAdapter({'gene_pattern': r'^G(\d)$', 'gene_replacement': r'locus_\1'})
    uniprot_data = make_uniprot_data({'locus_1': 'P1', 'locus_2': 'P2'})
    ec = build_ec_structure(toy_network)
    assert resolve_enzymes(ec, toy_network, adapter, uniprot_data) == []
    assert ec.genes == ['G1', 'G2']
    assert ec.enzymes == ['P1', 'P2']


def test_map_complexes_light(core_network, core_uniprot, adapter):
    ec = build_ec_structure(core_network, gecko_light=True)
    resolve_enzymes(ec, core_network, adapter, core_uniprot)
    map_complexes(ec, core_network)
    # genes: b1, b2, b3, b4, b5, b7, b8
    assert dense(ec.rxn_enz_mat).tolist() == [
        [1, 1, 0, 0, 0, 0, 0],  # GLCpts: b1 and b2
        [0, 0, 1, 0, 0, 0, 0],  # PGI: b3
        [0, 0, 0, 1, 0, 0, 0],  # PGI: b4
        [0, 0, 0, 0, 1, 0, 0],  # PFK: b5 (b6 not resolved)
        [0, 0, 0, 0, 0, 1, 0],  # PFK: b7
        [0, 0, 0, 0, 0, 0, 1],  # FBA: b8
        [0, 0, 0, 0, 0, 0, 0],  # BIOMASS: b9 not resolved
    ]
    df = ec.to_df()
    assert df.at[0, 'enzymes'] == 'Q1, P2'
    assert df.at[6, 'genes'] == ''
