"""Protein pseudometabolites and protein usage reactions.

Full models get one pseudometabolite per enzyme ('prot_<uniprot id>') and a usage
reaction drawing the protein from the protein pool. Both full and light models
get a protein pool pseudometabolite with a pool exchange reaction.
Enzyme usage in the metabolic reactions is added once kcat values are available.

f2ecm developers, October 2026
"""

import numpy as np
import pandas as pd

import f2ecm.prefixes as pf


def get_protein_genes(ec):
    """Genes per enzyme, sorted by enzyme id.

    Genes mapping to the same enzyme id get combined in an 'or' association.

    :param ec: enzyme constraint structure with enzyme data
    :type ec: EcStructure
    :return: gene product association per enzyme id, sorted by enzyme id
    :rtype: dict (key: enzyme id, val: str)
    """
    enz2genes = {}
    for gene, eid in zip(ec.genes, ec.enzymes):
        if eid not in enz2genes:
            enz2genes[eid] = []
        enz2genes[eid].append(gene)
    return {eid: ' or '.join(enz2genes[eid]) for eid in sorted(enz2genes)}


def add_protein_species(network, ec):
    """Add one protein pseudometabolite per enzyme.

    :param network: metabolic network
    :type network: Network
    :param ec: enzyme constraint structure with enzyme data
    :type ec: EcStructure
    :return: ids of protein pseudometabolites
    :rtype: list of str
    """
    prot_sids = [f'{pf.M_prot}{eid}' for eid in get_protein_genes(ec)]
    df_add_mets = pd.DataFrame({'name': prot_sids, 'compartment': pf.PROT_CID,
                                'notes': 'Enzyme-usage pseudometabolite'}, index=prot_sids)
    print(f'{len(df_add_mets):4d} protein pseudometabolites to add')
    network.add_metabolites(df_add_mets)
    return prot_sids


def add_protein_pool(network):
    """Add protein pool pseudometabolite.

    :param network: metabolic network
    :type network: Network
    """
    df_add_mets = pd.DataFrame([[pf.M_prot_pool, pf.PROT_CID, 'Enzyme-usage protein pool']],
                               index=[pf.M_prot_pool], columns=['name', 'compartment', 'notes'])
    network.add_metabolites(df_add_mets)


def add_usage_reactions(network, ec):
    """Add protein usage reactions, drawing proteins from the protein pool.

    Usage reactions 'usage_prot_<uniprot id>': prot_pool => prot_<uniprot id>,
    with flux bounds [0, inf] and gene product association of the protein.

    :param network: metabolic network with protein pseudometabolites and protein pool
    :type network: Network
    :param ec: enzyme constraint structure with enzyme data
    :type ec: EcStructure
    :return: ids of usage reactions
    :rtype: list of str
    """
    usage_rxns = {}
    for eid, gpr in get_protein_genes(ec).items():
        usage_rid = f'{pf.R_usage_prot}{eid}'
        usage_rxns[usage_rid] = [usage_rid, f'{pf.M_prot_pool} => {pf.M_prot}{eid}', 0.0, np.inf, gpr]
    cols = ['name', 'reactionString', 'fbcLb', 'fbcUb', 'fbcGeneProdAssoc']
    df_add_rxns = pd.DataFrame(list(usage_rxns.values()), index=list(usage_rxns), columns=cols)
    print(f'{len(df_add_rxns):4d} protein usage reactions to add')
    network.add_reactions(df_add_rxns)
    return list(usage_rxns)


def add_protein_pool_exchange(network):
    """Add protein pool exchange reaction, with open upper flux bound.

    :param network: metabolic network with protein pool
    :type network: Network
    """
    rid = pf.R_prot_pool_exchange
    df_add_rxns = pd.DataFrame([[rid, f'=> {pf.M_prot_pool}', 0.0, np.inf, '']], index=[rid],
                               columns=['name', 'reactionString', 'fbcLb', 'fbcUb', 'fbcGeneProdAssoc'])
    network.add_reactions(df_add_rxns)
