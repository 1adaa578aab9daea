"""Implementation of EcModel class.

Extend a genome-scale metabolic network with enzyme constraint structures,
so that kcat values and enzyme capacity constraints can be applied later.

f2ecm developers, October 2026
"""

from ..network.irreversible import (remove_pseudoreaction_gprs, normalize_directions,
                                    get_non_exchange_rxns, convert_to_irreversible)
from ..network.isoenzymes import expand_isoenzymes, sort_identifiers
from .ec_structure import build_ec_structure
from .enzymes import resolve_enzymes, map_complexes
from .protein_species import (add_protein_species, add_protein_pool, add_usage_reactions,
                              add_protein_pool_exchange)
from .validation import check_import_format, check_reserved_ids, check_gprs, warn_ambiguous_gprs


class EcModel:
    """Class EcModel

    Build upon a Network (genome-scale metabolic model), add an enzyme
    constraint structure (network.ec), protein pseudometabolites and
    protein usage reactions. kcat values are not yet set.

    .. code-block:: python

        network = Network.from_df(df_reactions)
        adapter = ModelAdapter.from_excel('iML1515_adapter.xlsx')
        uniprot_data = UniprotData(df_uniprot)

        ec_model = EcModel(network, adapter, uniprot_data)
        network = ec_model.build(gecko_light=False)

    The conversion should only be run once on a network.
    """

    def __init__(self, network, adapter, uniprot_data):
        """Instantiate EcModel

        :param network: metabolic network to be converted
        :type network: Network
        :param adapter: model specific configuration
        :type adapter: ModelAdapter
        :param uniprot_data: protein data for network genes
        :type uniprot_data: UniprotData
        """
        self.network = network
        self.adapter = adapter
        self.uniprot_data = uniprot_data
        self.unresolved_genes = []
        self.ambiguous_rxns = []

    def validate(self):
        """Check network before conversion.

        :raises PreconditionError: for incompatible networks or reserved ids in use
        :raises GprSyntaxError: for gene product associations that can not be parsed
        """
        check_import_format(self.network)
        check_reserved_ids(self.network)
        check_gprs(self.network)

    def build(self, gecko_light=None):
        """Convert the network to an enzyme constraint model.

        Steps:
        1. remove gene product associations from pseudoreactions
        2. invert reactions defined to carry negative flux only
        3. correct reversibility flags based on flux bounds
        4. split reversible non-exchange reactions (postfix '_REV')
        5. [full only] expand reactions catalyzed by isoenzymes (postfix '_EXP_<n>')
        6. [full only] sort reactions, keeping split and expanded reactions together
        7. create enzyme constraint structure, one entry per reaction/isoenzyme
        8. add enzyme data from Uniprot
        9. map ec-entries to enzyme complexes
        10. [full only] add protein pseudometabolites
        11. add protein pool pseudometabolite
        12. [full only] add protein usage reactions
        13. add protein pool exchange reaction, without upper bound

        All steps are performed on a copy of the network, which on success
        replaces the content of the network.

        :param gecko_light: create light model (default: as per adapter)
        :type gecko_light: bool or None
        :return: converted network, with enzyme constraint structure in attribute 'ec'
        :rtype: Network
        """
        gecko_light = bool(self.adapter.gecko_light if gecko_light is None else gecko_light)
        self.validate()
        self.ambiguous_rxns = warn_ambiguous_gprs(self.network)

        network = self.network.copy()
        remove_pseudoreaction_gprs(network)
        normalize_directions(network)
        convert_to_irreversible(network, get_non_exchange_rxns(network))
        if not gecko_light:
            expand_isoenzymes(network)
            sort_identifiers(network)

        ec = build_ec_structure(network, gecko_light)
        self.unresolved_genes = resolve_enzymes(ec, network, self.adapter, self.uniprot_data)
        map_complexes(ec, network)
        ec.check_consistency()

        if not gecko_light:
            add_protein_species(network, ec)
        add_protein_pool(network)
        if not gecko_light:
            add_usage_reactions(network, ec)
        add_protein_pool_exchange(network)

        network.ec = ec
        self.network.update(network)
        print(f'{ec.mode} enzyme constraint structure with {ec.n_entries} entries and {ec.n_enzymes} enzymes')
        self.network.print_size()
        return self.network


def make_ec_model(network, adapter, uniprot_data, gecko_light=False):
    """Convert a network to an enzyme constraint model.

    :param network: metabolic network to be converted
    :type network: Network
    :param adapter: model specific configuration
    :type adapter: ModelAdapter
    :param uniprot_data: protein data for network genes
    :type uniprot_data: UniprotData
    :param gecko_light: create light model (default: False)
    :type gecko_light: bool
    :return: converted network
    :rtype: Network
    """
    return EcModel(network, adapter, uniprot_data).build(gecko_light)
