"""Enzyme data resolution and mapping of ec-entries to enzyme complexes.

Enzyme ids, molecular weights and sequences are retrieved from Uniprot data
for the genes of the network. Gene product associations are then used to
set the reaction x enzyme matrix of the enzyme constraint structure.

f2ecm developers, September 2026
"""

from scipy import sparse

from ..network.gpr import get_isozymes


def resolve_enzymes(ec, network, adapter, uniprot_data):
    """Set enzyme data of the enzyme constraint structure from Uniprot data.

    Network gene ids get converted to Uniprot compatible keys by the adapter.
    Genes not found in Uniprot data are not added and will
    not be enzyme constrained.

    :param ec: enzyme constraint structure
    :type ec: EcStructure
    :param network: metabolic network
    :type network: Network
    :param adapter: model adapter
    :type adapter: ModelAdapter
    :param uniprot_data: protein data
    :type uniprot_data: UniprotData
    :return: genes not found in Uniprot data
    :rtype: list of str
    """
    keys = adapter.get_uniprot_compatible_genes(network.genes)
    df_lookup = uniprot_data.lookup(keys)
    found = df_lookup['found'].values.astype(bool)
    if not all(found):
        print(f'Cannot find {sum(~found)} of {len(found)} genes in local Uniprot data, '
              f'these will not be enzyme-constrained.')

    df_found = df_lookup[found]
    genes = [gene for gene, is_found in zip(network.genes, found) if is_found]
    ec.set_enzymes(genes, df_found['enzyme'], df_found['mw'], df_found['sequence'])
    return [gene for gene, is_found in zip(network.genes, found) if not is_found]


def map_complexes(ec, network):
    """Set the reaction x enzyme matrix of the enzyme constraint structure.

    For each ec-entry the governing enzyme (complex) is determined from
    the gene product association of the entry's reaction. Each
    gene of the complex with enzyme data gets a subunit stoichiometry of 1.
    Genes without enzyme data are skipped.

    :param ec: enzyme constraint structure with enzyme data set
    :type ec: EcStructure
    :param network: metabolic network
    :type network: Network
    """
    rid2idx = {rid: idx for idx, rid in enumerate(network.rxns)}
    gene2enz = {gene: idx for idx, gene in enumerate(ec.genes)}
    rid2isozymes = {}
    rxn_enz_mat = sparse.lil_matrix((ec.n_entries, ec.n_enzymes), dtype=int)
    for idx, rid in enumerate(ec.rxns):
        if rid not in rid2isozymes:
            rid2isozymes[rid] = get_isozymes(network.gr_rules[rid2idx[rid]])
        for gene in ec.get_entry_genes(idx, rid2isozymes[rid]):
            if gene in gene2enz:
                rxn_enz_mat[idx, gene2enz[gene]] = 1
    ec.rxn_enz_mat = rxn_enz_mat.tocsr()
