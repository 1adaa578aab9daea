"""Implementation of UniprotProtein class.

One protein record of a Uniprot export, reduced to the data required
for enzyme constraints: loci, molecular weight and sequence.
"""
import re


def get_loci(loci_str):
    """Split Uniprot 'Gene Names (ordered locus)' into individual loci.

    Loci are separated by blanks or ';', e.g. 'b0002; b0003 b0004'.

    :param loci_str: ordered locus names of the protein
    :type loci_str: str
    :return: loci
    :rtype: list of str
    """
    if type(loci_str) is not str:
        return []
    return [locus for locus in re.split(r'[\s;]+', loci_str) if len(locus) > 0]


class UniprotProtein:

    def __init__(self, s_data, locus_col='Gene Names (ordered locus)'):
        """Instantiate protein from a Uniprot export record.

        :param s_data: Uniprot record, name is the Uniprot accession
        :type s_data: pandas Series
        :param locus_col: column holding gene ids of the protein
        :type locus_col: str
        """
        self.id = s_data.name
        self.loci = get_loci(s_data.get(locus_col))
        self.mass = float(s_data['Mass'])
        self.sequence = s_data['Sequence'] if type(s_data['Sequence']) is str else ''
        ec_str = s_data.get('EC number')
        self.ec_numbers = [ec.strip() for ec in ec_str.split(';') if ec.strip()] if type(ec_str) is str else []

    def __repr__(self):
        return f'UniprotProtein({self.id!r}, loci={self.loci}, mass={self.mass})'

    @property
    def length(self):
        return len(self.sequence)
