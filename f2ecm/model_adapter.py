"""Implementation of ModelAdapter class.

Organism/model specific configuration used during enzyme constraint
model construction. A ModelAdapter is passed explicitly to the EcModel.

Subclasses can override get_uniprot_compatible_genes() where a regular
expression substitution of gene ids is not sufficient.

f2ecm developers, September 2026
"""

import os
import re
import pandas as pd

DEFAULT_PARAMS = {'org_name': '', 'base_dir': '.', 'gecko_light': False,
                  'gene_pattern': None, 'gene_replacement': ''}


class ModelAdapter:

    def __init__(self, params=None):
        """Instantiate ModelAdapter

        parameters (unspecified parameters are set to defaults):
        - 'org_name': organism name
        - 'base_dir': directory for model related data files
        - 'gecko_light': create light version of enzyme constraint structure
        - 'gene_pattern', 'gene_replacement': regular expression substitution applied
          to network gene ids to get keys compatible with Uniprot data

        :param params: adapter parameters
        :type params: dict (optional)
        """
        self.params = dict(DEFAULT_PARAMS)
        if params is not None:
            self.params.update(params)
        self.params['gecko_light'] = self._to_bool(self.params['gecko_light'])

    @classmethod
    def from_excel(cls, fname):
        """Create ModelAdapter from parameters in an Excel document.

        Excel document requires sheet 'general' with parameter names in
        the first column and parameter values in column 'value'.

        :param fname: file name of Excel document with adapter parameters
        :type fname: str
        :return: configured adapter
        :rtype: ModelAdapter
        """
        if os.path.exists(fname) is False:
            raise FileNotFoundError(f'{fname} does not exist')
        with pd.ExcelFile(fname) as xlsx:
            df_general = pd.read_excel(xlsx, sheet_name='general', index_col=0)
        params = {key: val for key, val in df_general['value'].to_dict().items() if not pd.isna(val)}
        print(f'{len(params)} model adapter parameters loaded from {fname}')
        return cls(params)

    @staticmethod
    def _to_bool(value):
        if type(value) is str:
            return value.strip().lower() in {'true', 'yes', '1'}
        return bool(value)

    def get_parameters(self):
        return self.params

    @property
    def gecko_light(self):
        return self.params['gecko_light']

    @property
    def base_dir(self):
        return self.params['base_dir']

    def get_uniprot_compatible_genes(self, genes):
        """Convert network gene ids to keys used in Uniprot data.

        :param genes: network gene ids
        :type genes: list of str
        :return: Uniprot compatible gene keys, in same order
        :rtype: list of str
        """
        pattern = self.params['gene_pattern']
        if type(pattern) is not str or len(pattern) == 0:
            return list(genes)
        replacement = self.params['gene_replacement']
        replacement = replacement if type(replacement) is str else ''
        return [re.sub(pattern, replacement, gene) for gene in genes]
