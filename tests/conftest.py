import numpy as np
import pandas as pd
import pytest

from f2ecm import Network, ModelAdapter, UniprotData

RXN_COLS = ['id', 'name', 'reactionString', 'fbcLb', 'fbcUb', 'fbcGeneProdAssoc']


def make_network(records, model_attrs=None):
    df_reactions = pd.DataFrame(records, columns=RXN_COLS).set_index('id')
    return Network.from_df(df_reactions, model_attrs=model_attrs)


def make_uniprot_data(locus2uid):
    records = [[uid, locus, 1000.0 * (idx + 1), 'M' + 'A' * (idx + 1)]
               for idx, (locus, uid) in enumerate(locus2uid.items())]
    df_uniprot = pd.DataFrame(records, columns=['Entry', 'Gene Names (ordered locus)', 'Mass', 'Sequence'])
    return UniprotData(df_uniprot)


@pytest.fixture
def toy_network():
    """R1 catalyzed by isoenzymes G1 or G2, R2 without genes."""
    return make_network([
        ['R1', 'reaction 1', 'A => B', 0.0, 1000.0, 'G1 or G2'],
        ['R2', 'reaction 2', 'B => C', 0.0, 1000.0, None],
    ])


@pytest.fixture
def toy_uniprot():
    return make_uniprot_data({'G1': 'P1', 'G2': 'P2'})


@pytest.fixture
def core_network():
    """Small glycolysis like network.

    EX_glc: exchange reaction (reversible, not split)
    GLCpts: reversible, enzyme complex
    PGI: reversible, isoenzymes
    PFK: irreversible, isoenzymes one of which is a complex
    FBA: defined in negative direction only
    BIOMASS: pseudoreaction with a gene association to be removed
    """
    return make_network([
        ['EX_glc', 'glucose exchange', 'glc_e -> ', -10.0, 1000.0, None],
        ['GLCpts', 'glucose transport', 'glc_e -> g6p_c', -1000.0, 1000.0, 'b1 and b2'],
        ['PGI', 'glucose-6-phosphate isomerase', 'g6p_c -> f6p_c', -1000.0, 1000.0, 'b3 or b4'],
        ['PFK', 'phosphofructokinase', 'f6p_c => fdp_c', 0.0, 1000.0, '(b5 and b6) or b7'],
        ['FBA', 'fructose-bisphosphate aldolase', 'fdp_c -> dhap_c', -1000.0, 0.0, 'b8'],
        ['BIOMASS', 'Biomass pseudoreaction', 'dhap_c + f6p_c => biomass_c', 0.0, 1000.0, 'b9'],
    ])


@pytest.fixture
def core_uniprot():
    # b6 and b9 not in Uniprot data
    return make_uniprot_data({'b1': 'Q1', 'b2': 'P2', 'b3': 'P3', 'b4': 'P4',
                              'b5': 'P5', 'b7': 'P7', 'b8': 'A8'})


@pytest.fixture
def adapter():
    return ModelAdapter({'org_name': 'toy'})


def dense(matrix):
    return np.asarray(matrix.toarray())
