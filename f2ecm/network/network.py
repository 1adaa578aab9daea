"""Implementation of Network class.

Stoichiometric model of a genome-scale metabolic network in matrix form:
- ordered reaction, metabolite and gene identifiers
- sparse stoichiometric matrix (metabolites x reactions)
- flux bounds and reversibility flags per reaction
- gene product associations (GPR) and sparse reaction x gene incidence matrix

Reactions and metabolites get added via pandas DataFrames, similar to
reaction/species tables exported by sbmlxdf.

f2ecm developers, October 2026
"""

import re
import copy
import numpy as np
import pandas as pd
from scipy import sparse

from .gpr import parse_gpr
from ..utils.mapping_utils import get_srefs, parse_reaction_string, srefs2stoic, stoic2reaction_string
from ..exceptions import PreconditionError

DEFAULT_FLUX_BOUND = 1000.0
COBRA_MODEL_ATTRS = {'rules', 'modelID'}
COBRA_RULE_PATTERN = re.compile(r'x\(\d+\)|&|\|')


def check_cobra_format(rxns, gr_rules, model_attrs=None):
    """Check that reaction data does not stem from a COBRA toolbox style model.

    COBRA toolbox models carry 'rules' and 'modelID' fields, their
    rules refer to genes by index, e.g. 'x(1) | x(2)'.

    :param rxns: reaction ids
    :type rxns: list of str
    :param gr_rules: gene product associations
    :type gr_rules: list of str
    :param model_attrs: model attributes (optional)
    :type model_attrs: dict
    :raises PreconditionError: if data seems to be in COBRA toolbox format
    """
    cobra_attrs = COBRA_MODEL_ATTRS.intersection(model_attrs if model_attrs is not None else {})
    cobra_rids = [rid for rid, gpr in zip(rxns, gr_rules) if type(gpr) is str and COBRA_RULE_PATTERN.search(gpr)]
    if len(cobra_attrs) > 0 or len(cobra_rids) > 0:
        raise PreconditionError(
            f'The network is likely imported from a COBRA toolbox model (fields: {sorted(cobra_attrs)}, '
            f'index based rules in {len(cobra_rids)} reactions, e.g. {cobra_rids[:3]}). Instead, create the '
            f'network with Network.from_df() using gene product associations with gene ids and "and"/"or" '
            f'operators in column "fbcGeneProdAssoc", e.g. "b0001 or (b0002 and b0003)".')


class Network:

    def __init__(self, rxns, mets, S, lb, ub, gr_rules=None, rev=None, rxn_names=None,
                 met_names=None, met_compartments=None, met_notes=None, genes=None,
                 rxn_gene_mat=None, model_attrs=None):
        """Instantiate Network

        Optional data gets defaulted. Genes and the reaction gene incidence
        matrix, if not provided, are determined from the gene product associations.

        :param rxns: reaction ids
        :type rxns: list of str
        :param mets: metabolite ids
        :type mets: list of str
        :param S: stoichiometric matrix (metabolites x reactions)
        :type S: scipy.sparse matrix or numpy.ndarray
        :param lb: flux lower bounds
        :type lb: array-like of float
        :param ub: flux upper bounds
        :type ub: array-like of float
        :param gr_rules: gene product associations ('' for reactions without genes)
        :type gr_rules: list of str (optional)
        :param rev: reversibility flags (default: derived from flux bounds)
        :type rev: array-like of bool (optional)
        :param genes: gene ids (default: genes used in gr_rules)
        :type genes: list of str (optional)
        :param rxn_gene_mat: reaction x gene incidence matrix
        :type rxn_gene_mat: scipy.sparse matrix or numpy.ndarray (optional)
        :param model_attrs: model attributes, e.g. 'id', 'name'
        :type model_attrs: dict (optional)
        :raises PreconditionError: for COBRA toolbox style rules, when genes get determined from gr_rules
        """
        self.rxns = list(rxns)
        self.mets = list(mets)
        self.S = sparse.csc_matrix(S, dtype=float)
        self.lb = np.array(lb, dtype=float)
        self.ub = np.array(ub, dtype=float)
        n_rxns = len(self.rxns)
        n_mets = len(self.mets)
        self.gr_rules = list(gr_rules) if gr_rules is not None else [''] * n_rxns
        self.gr_rules = [gpr if type(gpr) is str else '' for gpr in self.gr_rules]
        self.rev = (np.array(rev, dtype=bool) if rev is not None
                    else (self.lb < 0.0) & (self.ub > 0.0))
        self.rxn_names = list(rxn_names) if rxn_names is not None else list(self.rxns)
        self.met_names = list(met_names) if met_names is not None else list(self.mets)
        self.met_compartments = list(met_compartments) if met_compartments is not None else [''] * n_mets
        self.met_notes = list(met_notes) if met_notes is not None else [''] * n_mets
        self.model_attrs = dict(model_attrs) if model_attrs is not None else {}

        if genes is None or rxn_gene_mat is None:
            check_cobra_format(self.rxns, self.gr_rules)
        if genes is None:
            genes = []
            for gpr in self.gr_rules:
                tree = parse_gpr(gpr)
                if tree is not None:
                    genes.extend([gene for gene in tree.genes() if gene not in genes])
        self.genes = list(genes)
        if rxn_gene_mat is None:
            self.rxn_gene_mat = self._get_rxn_gene_mat(self.gr_rules)
        else:
            self.rxn_gene_mat = sparse.csr_matrix(rxn_gene_mat, dtype=float)

        self.ec = None
        self.check_shapes()
        self.orig_size = {'n_mets': n_mets, 'n_rxns': n_rxns, 'n_genes': len(self.genes)}

    @classmethod
    def from_df(cls, df_reactions, df_species=None, model_attrs=None):
        """Create Network from reactions table.

        df_reactions structure (index: reaction ids):
        - 'reactionString', e.g. 'M_fum_c + M_h2o_c -> M_mal__L_c' ('=>' for irreversible)
          or sbmlxdf species references in 'reactants' and 'products'
          together with 'reversible'
        - 'fbcLb', 'fbcUb': numerical flux bounds (default: +/-1000, 0 for irreversible lb)
        - optional: 'name', 'fbcGeneProdAssoc' (gene product association, e.g. 'G1 or G2')

        df_species (index: metabolite ids) with optional 'name', 'compartment', 'notes'.
        Metabolites not listed get added in order of appearance in reactions.

        :param df_reactions: reaction records
        :type df_reactions: pandas DataFrame
        :param df_species: metabolite records (optional)
        :type df_species: pandas DataFrame
        :param model_attrs: model attributes (optional)
        :type model_attrs: dict
        :return: network
        :rtype: Network
        """
        mets = list(df_species.index) if df_species is not None else []
        met_idx = {sid: idx for idx, sid in enumerate(mets)}
        rxn_stoics = []
        lbs = []
        ubs = []
        revs = []
        gr_rules = []
        rxn_names = []
        for rid, row in df_reactions.iterrows():
            if type(row.get('reactionString')) is str:
                r_data = parse_reaction_string(row['reactionString'])
            else:
                r_data = {'reversible': bool(row.get('reversible', True)),
                          'reactants': get_srefs(row.get('reactants')),
                          'products': get_srefs(row.get('products'))}
            stoic = srefs2stoic(r_data['reactants'], r_data['products'])
            for sid in stoic:
                if sid not in met_idx:
                    met_idx[sid] = len(mets)
                    mets.append(sid)
            rxn_stoics.append(stoic)
            default_lb = -DEFAULT_FLUX_BOUND if r_data['reversible'] else 0.0
            lb = row.get('fbcLb', default_lb)
            ub = row.get('fbcUb', DEFAULT_FLUX_BOUND)
            lbs.append(default_lb if pd.isna(lb) else float(lb))
            ubs.append(DEFAULT_FLUX_BOUND if pd.isna(ub) else float(ub))
            revs.append(r_data['reversible'])
            gpr = row.get('fbcGeneProdAssoc')
            gr_rules.append(gpr.replace('assoc=', '') if type(gpr) is str else '')
            name = row.get('name')
            rxn_names.append(name if type(name) is str else rid)

        S = sparse.lil_matrix((len(mets), len(rxn_stoics)))
        for ridx, stoic in enumerate(rxn_stoics):
            for sid, val in stoic.items():
                S[met_idx[sid], ridx] = val

        met_names = list(mets)
        met_compartments = [''] * len(mets)
        met_notes = [''] * len(mets)
        if df_species is not None:
            for sid, row in df_species.iterrows():
                idx = met_idx[sid]
                if type(row.get('name')) is str:
                    met_names[idx] = row['name']
                if type(row.get('compartment')) is str:
                    met_compartments[idx] = row['compartment']
                if type(row.get('notes')) is str:
                    met_notes[idx] = row['notes']

        return cls(list(df_reactions.index), mets, S, lbs, ubs, gr_rules=gr_rules, rev=revs,
                   rxn_names=rxn_names, met_names=met_names, met_compartments=met_compartments,
                   met_notes=met_notes, model_attrs=model_attrs)

    def check_shapes(self):
        """Check that ids are unique and array sizes match.

        :raises ValueError: on duplicate ids or inconsistent sizes
        """
        for component, ids in {'reaction': self.rxns, 'metabolite': self.mets, 'gene': self.genes}.items():
            if len(set(ids)) != len(ids):
                dup_ids = sorted({xid for xid in ids if ids.count(xid) > 1})
                raise ValueError(f'duplicate {component} ids: {dup_ids}')
        n_rxns = len(self.rxns)
        n_mets = len(self.mets)
        if self.S.shape != (n_mets, n_rxns):
            raise ValueError(f'stoichiometric matrix shape {self.S.shape} does not match '
                             f'{n_mets} metabolites x {n_rxns} reactions')
        if self.rxn_gene_mat.shape != (n_rxns, len(self.genes)):
            raise ValueError(f'reaction gene matrix shape {self.rxn_gene_mat.shape} does not match '
                             f'{n_rxns} reactions x {len(self.genes)} genes')
        for attr in ['lb', 'ub', 'rev', 'gr_rules', 'rxn_names']:
            if len(getattr(self, attr)) != n_rxns:
                raise ValueError(f'length of {attr} ({len(getattr(self, attr))}) does not match '
                                 f'{n_rxns} reactions')
        for attr in ['met_names', 'met_compartments', 'met_notes']:
            if len(getattr(self, attr)) != n_mets:
                raise ValueError(f'length of {attr} ({len(getattr(self, attr))}) does not match '
                                 f'{n_mets} metabolites')

    def _get_rxn_gene_mat(self, gr_rules, rxns=None):
        rxns = rxns if rxns is not None else self.rxns
        gene_idx = {gene: idx for idx, gene in enumerate(self.genes)}
        rxn_gene_mat = sparse.lil_matrix((len(gr_rules), len(self.genes)))
        for ridx, gpr in enumerate(gr_rules):
            tree = parse_gpr(gpr)
            if tree is not None:
                for gene in tree.genes():
                    if gene not in gene_idx:
                        raise ValueError(f'gene {gene} of reaction {rxns[ridx]} not in network genes')
                    rxn_gene_mat[ridx, gene_idx[gene]] = 1.0
        return rxn_gene_mat.tocsr()

    def copy(self):
        return copy.deepcopy(self)

    def update(self, other):
        """Replace network content by content of another network.

        :param other: network to take over
        :type other: Network
        """
        self.__dict__.update(other.__dict__)

    def print_size(self):
        """Print current network size (and difference to original network)."""
        size = {'n_mets': len(self.mets), 'n_rxns': len(self.rxns), 'n_genes': len(self.genes)}
        print(f'{size["n_mets"]} metabolites ({size["n_mets"] - self.orig_size["n_mets"]:+}); '
              f'{size["n_rxns"]} reactions ({size["n_rxns"] - self.orig_size["n_rxns"]:+}); '
              f'{size["n_genes"]} genes ({size["n_genes"] - self.orig_size["n_genes"]:+})')

    def get_n_coefficients(self):
        """Number of non-zero stoichiometric coefficients per reaction.

        :return: non-zero coefficients per reaction
        :rtype: numpy.ndarray of int
        """
        return np.asarray((self.S != 0).sum(axis=0)).flatten()

    def get_exchange_rxn_idxs(self):
        """Indices of exchange reactions, i.e. with a single metabolite.

        :return: reaction indices
        :rtype: numpy.ndarray of int
        """
        return np.flatnonzero(self.get_n_coefficients() == 1)

    def get_rxn_genes(self, idx):
        """Genes associated with a reaction, as per reaction gene matrix.

        :param idx: reaction index
        :type idx: int
        :return: gene ids
        :rtype: list of str
        """
        return [self.genes[gidx] for gidx in sorted(self.rxn_gene_mat[idx].nonzero()[1])]

    def get_stoic(self, idx):
        """Stoichiometry of a reaction.

        :param idx: reaction index
        :type idx: int
        :return: metabolites with stoichiometric coefficients
        :rtype: dict (key: metabolite id, val: float)
        """
        col = self.S[:, idx].tocoo()
        return {self.mets[midx]: val for midx, val in sorted(zip(col.row, col.data)) if val != 0.0}

    def set_gr_rule(self, idx, gpr):
        """Set gene product association and update reaction gene matrix row.

        :param idx: reaction index
        :type idx: int
        :param gpr: gene product association ('' to remove genes)
        :type gpr: str
        """
        self.set_gr_rules({idx: gpr})

    def set_gr_rules(self, idx2gpr):
        """Set gene product associations of several reactions at once.

        Reaction gene matrix rows of these reactions get replaced in a single
        sparse matrix operation. Genes must exist in the network; on error
        the network is not modified.

        :param idx2gpr: gene product association per reaction index
        :type idx2gpr: dict (key: reaction index, val: str)
        """
        if len(idx2gpr) == 0:
            return
        idxs = list(idx2gpr)
        gprs = [idx2gpr[idx] for idx in idxs]
        new_rows = self._get_rxn_gene_mat(gprs, [self.rxns[idx] for idx in idxs])

        keep = np.ones(len(self.rxns))
        keep[idxs] = 0.0
        placement = sparse.csr_matrix((np.ones(len(idxs)), (idxs, np.arange(len(idxs)))),
                                      shape=(len(self.rxns), len(idxs)))
        rxn_gene_mat = (sparse.diags(keep) @ self.rxn_gene_mat + placement @ new_rows).tocsr()
        rxn_gene_mat.eliminate_zeros()
        self.rxn_gene_mat = rxn_gene_mat
        for idx, gpr in zip(idxs, gprs):
            self.gr_rules[idx] = gpr

    def negate_rxns(self, mask):
        """Negate stoichiometric columns of selected reactions.

        :param mask: reactions to negate
        :type mask: numpy.ndarray of bool
        """
        signs = np.where(mask, -1.0, 1.0)
        self.S = (self.S @ sparse.diags(signs)).tocsc()

    def reorder_rxns(self, order, rxn_ids=None):
        """Reorder reactions, reactions can be duplicated or dropped.

        All reaction related data (stoichiometric columns, bounds, reversibility,
        names, gene product associations and gene matrix rows) follow the new order.

        :param order: indices of current reactions in new order
        :type order: list or numpy.ndarray of int
        :param rxn_ids: new reaction ids (default: ids of reordered reactions)
        :type rxn_ids: list of str (optional)
        """
        order = np.array(order, dtype=int)
        self.rxns = list(rxn_ids) if rxn_ids is not None else [self.rxns[idx] for idx in order]
        self.S = self.S[:, order].tocsc()
        self.lb = self.lb[order]
        self.ub = self.ub[order]
        self.rev = self.rev[order]
        self.rxn_names = [self.rxn_names[idx] for idx in order]
        self.gr_rules = [self.gr_rules[idx] for idx in order]
        self.rxn_gene_mat = self.rxn_gene_mat[order, :].tocsr()
        self.check_shapes()

    def add_metabolites(self, df_mets):
        """Add metabolites to the network.

        :param df_mets: metabolite records (index: metabolite ids) with
            optional columns 'name', 'compartment', 'notes'
        :type df_mets: pandas DataFrame
        """
        new_mets = list(df_mets.index)
        conflicts = set(new_mets).intersection(self.mets)
        if len(conflicts) > 0:
            raise ValueError(f'metabolites already in network: {sorted(conflicts)}')
        for sid, row in df_mets.iterrows():
            self.mets.append(sid)
            self.met_names.append(row['name'] if type(row.get('name')) is str else sid)
            self.met_compartments.append(row['compartment'] if type(row.get('compartment')) is str else '')
            self.met_notes.append(row['notes'] if type(row.get('notes')) is str else '')
        self.S = sparse.vstack([self.S, sparse.csc_matrix((len(new_mets), len(self.rxns)))]).tocsc()
        self.check_shapes()
        print(f'{len(new_mets):4d} metabolites added to the network ({len(self.mets)} total metabolites)')

    def add_reactions(self, df_reactions):
        """Add reactions to the network.

        Metabolites and genes used by the reactions need to exist in the network.

        :param df_reactions: reaction records (index: reaction ids) with columns
            'reactionString', 'fbcLb', 'fbcUb' and optional 'name', 'fbcGeneProdAssoc'
        :type df_reactions: pandas DataFrame
        """
        new_rxns = list(df_reactions.index)
        conflicts = set(new_rxns).intersection(self.rxns)
        if len(conflicts) > 0:
            raise ValueError(f'reactions already in network: {sorted(conflicts)}')
        met_idx = {sid: idx for idx, sid in enumerate(self.mets)}
        new_cols = sparse.lil_matrix((len(self.mets), len(new_rxns)))
        new_gr_rules = []
        new_names = []
        for ridx, (rid, row) in enumerate(df_reactions.iterrows()):
            r_data = parse_reaction_string(row['reactionString'])
            for sid, val in srefs2stoic(r_data['reactants'], r_data['products']).items():
                if sid not in met_idx:
                    raise ValueError(f'metabolite {sid} of reaction {rid} not in network')
                new_cols[met_idx[sid], ridx] = val
            gpr = row.get('fbcGeneProdAssoc')
            new_gr_rules.append(gpr if type(gpr) is str else '')
            new_names.append(row['name'] if type(row.get('name')) is str else rid)
        new_gene_mat = self._get_rxn_gene_mat(new_gr_rules, new_rxns)
        lb = np.array(df_reactions['fbcLb'], dtype=float)
        ub = np.array(df_reactions['fbcUb'], dtype=float)

        # network gets modified only after all new reactions are checked
        self.rxns.extend(new_rxns)
        self.rxn_names.extend(new_names)
        self.S = sparse.hstack([self.S, new_cols.tocsc()]).tocsc()
        self.lb = np.concatenate([self.lb, lb])
        self.ub = np.concatenate([self.ub, ub])
        self.rev = np.concatenate([self.rev, (lb < 0.0) & (ub > 0.0)])
        self.gr_rules.extend(new_gr_rules)
        self.rxn_gene_mat = sparse.vstack([self.rxn_gene_mat, new_gene_mat]).tocsr()
        self.check_shapes()
        print(f'{len(new_rxns):4d} reactions added to the network ({len(self.rxns)} total reactions)')

    def to_df(self):
        """Export reactions to a table.

        :return: reaction records
        :rtype: pandas DataFrame
        """
        records = []
        for idx, rid in enumerate(self.rxns):
            records.append([rid, self.rxn_names[idx], stoic2reaction_string(self.get_stoic(idx), self.rev[idx]),
                            self.lb[idx], self.ub[idx], self.rev[idx], self.gr_rules[idx]])
        cols = ['id', 'name', 'reactionString', 'fbcLb', 'fbcUb', 'reversible', 'fbcGeneProdAssoc']
        return pd.DataFrame(records, columns=cols).set_index('id')
