"""Implementation of enzyme constraint structure classes.

The enzyme constraint structure holds enzyme and kcat related data
for reactions associated with genes. It contains:
- per ec-entry (reaction/isoenzyme pair): reaction id, kcat, kcat source,
  notes, EC numbers and enzyme concentration (all unset at creation)
- per enzyme: gene id, enzyme id (Uniprot accession), molecular weight,
  amino acid sequence and concentration
- reaction x enzyme matrix (ec-entries x enzymes), non-zero values
  indicate number of subunits of an enzyme in the enzyme complex

Full structure (FullEcStructure):
    network reactions are expanded per isoenzyme, one ec-entry per
    gene associated reaction.
Light structure (LightEcStructure):
    network reactions are not expanded, each gene associated reaction
    has one ec-entry per isoenzyme, numbered by isozyme ordinal.

f2ecm developers, September 2026
"""

import numpy as np
import pandas as pd
from scipy import sparse

from ..network.gpr import get_isozymes
from ..exceptions import InternalConsistencyError

ENTRY_COLS = ['rxn', 'kcat', 'source', 'notes', 'eccodes', 'conc']
ENZYME_COLS = ['gene', 'enzyme', 'mw', 'sequence', 'conc']


class EcStructure:
    """Base class of enzyme constraint structures."""

    mode = None
    gecko_light = None

    def __init__(self, rxns):
        """Instantiate structure with unset data for each ec-entry.

        :param rxns: reaction ids, one per ec-entry
        :type rxns: list of str
        """
        n_entries = len(rxns)
        self.df_entries = pd.DataFrame({'rxn': list(rxns),
                                        'kcat': np.zeros(n_entries),
                                        'source': [''] * n_entries,
                                        'notes': [''] * n_entries,
                                        'eccodes': [''] * n_entries,
                                        'conc': np.full(n_entries, np.nan)})
        self.df_enzymes = pd.DataFrame(columns=ENZYME_COLS)
        self.rxn_enz_mat = sparse.csr_matrix((n_entries, 0), dtype=int)

    def __repr__(self):
        return f'{type(self).__name__}({self.n_entries} entries, {self.n_enzymes} enzymes)'

    @property
    def n_entries(self):
        return len(self.df_entries)

    @property
    def n_enzymes(self):
        return len(self.df_enzymes)

    @property
    def rxns(self):
        return list(self.df_entries['rxn'])

    @property
    def kcat(self):
        return self.df_entries['kcat'].values

    @property
    def source(self):
        return list(self.df_entries['source'])

    @property
    def notes(self):
        return list(self.df_entries['notes'])

    @property
    def eccodes(self):
        return list(self.df_entries['eccodes'])

    @property
    def genes(self):
        return list(self.df_enzymes['gene'])

    @property
    def enzymes(self):
        return list(self.df_enzymes['enzyme'])

    @property
    def mw(self):
        return self.df_enzymes['mw'].values.astype(float)

    @property
    def sequence(self):
        return list(self.df_enzymes['sequence'])

    @property
    def concs(self):
        return self.df_enzymes['conc'].values.astype(float)

    def set_enzymes(self, genes, enzymes, mw, sequence):
        """Set enzyme data. Concentrations are unset.

        Resets the reaction x enzyme matrix.

        :param genes: gene ids
        :type genes: list of str
        :param enzymes: enzyme ids (Uniprot accessions)
        :type enzymes: list of str
        :param mw: molecular weights in g/mol
        :type mw: list of float
        :param sequence: amino acid sequences
        :type sequence: list of str
        """
        self.df_enzymes = pd.DataFrame({'gene': list(genes), 'enzyme': list(enzymes),
                                        'mw': np.array(mw, dtype=float), 'sequence': list(sequence),
                                        'conc': np.full(len(genes), np.nan)}, columns=ENZYME_COLS)
        self.rxn_enz_mat = sparse.csr_matrix((self.n_entries, self.n_enzymes), dtype=int)

    def get_entry_genes(self, idx, isozymes):
        """Genes of the enzyme (complex) governing an ec-entry.

        :param idx: ec-entry index
        :type idx: int
        :param isozymes: genes per isoenzyme of the entry's reaction
        :type isozymes: list of list of str
        :return: gene ids
        :rtype: list of str
        """
        raise NotImplementedError

    def check_consistency(self):
        """Check sizes of ec-entry data, enzyme data and reaction x enzyme matrix.

        :raises InternalConsistencyError: if sizes are inconsistent
        """
        for col in ENTRY_COLS:
            if len(self.df_entries[col]) != self.n_entries:
                raise InternalConsistencyError(f'ec-entry field {col} has {len(self.df_entries[col])} '
                                               f'values, {self.n_entries} expected')
        if self.rxn_enz_mat.shape != (self.n_entries, self.n_enzymes):
            raise InternalConsistencyError(f'reaction x enzyme matrix shape {self.rxn_enz_mat.shape} does not '
                                           f'match {self.n_entries} ec-entries x {self.n_enzymes} enzymes')
        if len(set(self.genes)) != self.n_enzymes:
            raise InternalConsistencyError('duplicate genes in enzyme data')

    def to_df(self):
        """Table of ec-entries with composition of their enzyme (complex).

        :return: ec-entries with genes and enzymes
        :rtype: pandas DataFrame
        """
        df = self.df_entries.copy()
        genes = self.genes
        enzymes = self.enzymes
        df_genes = []
        df_enzymes = []
        for idx in range(self.n_entries):
            enz_idxs = sorted(self.rxn_enz_mat[idx].nonzero()[1])
            df_genes.append(', '.join([genes[eidx] for eidx in enz_idxs]))
            df_enzymes.append(', '.join([enzymes[eidx] for eidx in enz_idxs]))
        df['genes'] = df_genes
        df['enzymes'] = df_enzymes
        return df


class FullEcStructure(EcStructure):
    """One ec-entry per (isoenzyme expanded) gene associated reaction."""

    mode = 'full'
    gecko_light = False

    def get_entry_genes(self, idx, isozymes):
        genes = []
        for isozyme in isozymes:
            genes.extend([gene for gene in isozyme if gene not in genes])
        return genes

    def check_consistency(self):
        super().check_consistency()
        if len(set(self.rxns)) != self.n_entries:
            raise InternalConsistencyError('duplicate reactions in ec-entries of full structure')


class LightEcStructure(EcStructure):
    """One ec-entry per isoenzyme of each gene associated reaction."""

    mode = 'light'
    gecko_light = True

    def __init__(self, rxns, isozymes):
        """Instantiate structure with unset data for each ec-entry.

        :param rxns: reaction ids, repeated for each isoenzyme
        :type rxns: list of str
        :param isozymes: isozyme ordinal of each ec-entry, starting at 1 per reaction
        :type isozymes: list of int
        """
        super().__init__(rxns)
        self.df_entries['isozyme'] = np.array(isozymes, dtype=int)

    @property
    def isozymes(self):
        return self.df_entries['isozyme'].values

    @property
    def entry_ids(self):
        """Unique ec-entry ids with zero-padded isozyme ordinal, e.g. '001_R_PGK'."""
        width = max(3, len(str(self.isozymes.max()))) if self.n_entries > 0 else 3
        return [f'{iso:0{width}d}_{rid}' for iso, rid in zip(self.isozymes, self.rxns)]

    def get_entry_genes(self, idx, isozymes):
        return list(isozymes[self.isozymes[idx] - 1])

    def check_consistency(self):
        super().check_consistency()
        expected = 1
        prev_rid = None
        for rid, iso in zip(self.rxns, self.isozymes):
            expected = expected + 1 if rid == prev_rid else 1
            if iso != expected:
                raise InternalConsistencyError(f'isozyme ordinal {iso} of reaction {rid} out of sequence, '
                                               f'{expected} expected')
            prev_rid = rid


def get_rxns_with_genes(network):
    """Indices of reactions associated with genes.

    :param network: metabolic network
    :type network: Network
    :return: reaction indices
    :rtype: numpy.ndarray of int
    """
    return np.flatnonzero(network.rxn_gene_mat.getnnz(axis=1) > 0)


def build_ec_structure(network, gecko_light=False):
    """Create enzyme constraint structure with one ec-entry per reaction/isoenzyme.

    Full: one ec-entry per gene associated reaction (reactions already
    expanded per isoenzyme).
    Light: for each gene associated reaction one ec-entry per isoenzyme,
    i.e. number of OR alternatives in the gene product association.

    :param network: metabolic network
    :type network: Network
    :param gecko_light: create light structure
    :type gecko_light: bool
    :return: enzyme constraint structure
    :rtype: FullEcStructure or LightEcStructure
    """
    rxn_idxs = get_rxns_with_genes(network)
    if not gecko_light:
        return FullEcStructure([network.rxns[idx] for idx in rxn_idxs])

    rxns = []
    isozymes = []
    for idx in rxn_idxs:
        n_isozymes = len(get_isozymes(network.gr_rules[idx]))
        rxns.extend([network.rxns[idx]] * n_isozymes)
        isozymes.extend(range(1, n_isozymes + 1))
    return LightEcStructure(rxns, isozymes)
