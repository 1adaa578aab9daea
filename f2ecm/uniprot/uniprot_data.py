"""Implementation of UniprotData class.

In-memory protein table, built from an Uniprot export, e.g. a query
for an organism with columns 'Entry', 'Gene Names (ordered locus)',
'Mass', 'Sequence', 'EC number'.

Used to look up enzyme id (Uniprot accession), molecular weight and
amino acid sequence for genes of a metabolic network.

f2ecm developers, July 2026
"""

import pandas as pd

from .uniprot_protein import UniprotProtein


class UniprotData:

    def __init__(self, df_uniprot, locus_col='Gene Names (ordered locus)'):
        """Instantiate from Uniprot export.

        In case a locus is assigned to several proteins, the first protein is used.

        :param df_uniprot: Uniprot export, index or column 'Entry' with Uniprot accessions
        :type df_uniprot: pandas DataFrame
        :param locus_col: column with gene ids to be used as lookup keys
        :type locus_col: str
        """
        if 'Entry' in df_uniprot.columns:
            df_uniprot = df_uniprot.set_index('Entry')
        self.proteins = {}
        self.locus2uid = {}
        for uid, row in df_uniprot.iterrows():
            p = UniprotProtein(row, locus_col)
            self.proteins[uid] = p
            for locus in p.loci:
                if locus not in self.locus2uid:
                    self.locus2uid[locus] = uid

    def lookup(self, keys):
        """Look up proteins for given keys (exact match).

        :param keys: gene derived keys, e.g. ordered loci
        :type keys: list of str
        :return: table with 'found', 'enzyme', 'mw', 'sequence' per key (in order of keys)
        :rtype: pandas DataFrame
        """
        records = []
        for key in keys:
            uid = self.locus2uid.get(key)
            if uid is not None:
                p = self.proteins[uid]
                records.append([key, True, uid, p.mass, p.sequence])
            else:
                records.append([key, False, None, float('nan'), None])
        cols = ['key', 'found', 'enzyme', 'mw', 'sequence']
        return pd.DataFrame(records, columns=cols)
