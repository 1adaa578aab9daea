"""Implementation of utility functions for parsing reaction data.

Reactions can be defined either by a reaction string, e.g.
'M_fum_c + M_h2o_c -> M_mal__L_c', or by species references strings
as exported by sbmlxdf, e.g. 'species=M_fum_c, stoic=1.0; species=M_h2o_c, stoic=1.0'
"""
import re
import sbmlxdf


def get_srefs(srefs_str):
    """Extract composition from srefs string (component and stoichiometry).

    Species references string contains ';' separated records of composition.
    Each record contains ',' separated key=value pairs. Required keys are
    'species' and 'stoic'.

    :param srefs_str: species references string with attibutes 'species' and 'stoic'
    :type srefs_str: str
    :return: composition (components with stoichiometry
    :rtype: dict (key: species id, value: stoichiometry (float)
    """
    srefs = {}
    if type(srefs_str) == str:
        for sref_str in sbmlxdf.record_generator(srefs_str):
            params = sbmlxdf.extract_params(sref_str)
            srefs[params['species']] = float(params['stoic'])
    return srefs


def stoicstr2srefs(stoichometric_str):
    """Generate species references from one side of reaction string.

    E.g. '2.0 M_h_e + M_mal__L_e' transformed to
    {'M_h_e': 2.0, 'M_mal__L_e': 1.0}

    :param stoichometric_str: stoichiometric string
    :type stoichometric_str: str
    :returns: species with stoichiometry
    :rtype: dict (key: species/str, val: stoic/float)
    """
    srefs = {}
    components = [item.strip() for item in stoichometric_str.split(' + ')]
    for component in components:
        if len(component) == 0:
            continue
        if ' ' in component:
            _stoic, _sid = component.split(' ', 1)
            sid = _sid.strip()
            stoic = float(_stoic)
        else:
            sid = component
            stoic = 1.0
        srefs[sid] = srefs.get(sid, 0.0) + stoic
    return srefs


def parse_reaction_string(reaction_str):
    """Extract reactants/products and reversibility from reaction string.

    e.g. 'M_fum_c + 2 M_h2o_c -> M_mal__L_c' for a reversible reaction
    {'reversible': True, 'reactants': {'M_fum_c': 1.0, 'M_h2o_c': 2.0},
     'products': {'M_mal__L_c': 1.0}}
    e.g. 'M_ac_e => ' for an irreversible reaction with no product

    :param reaction_str: reaction string
    :type reaction_str: str
    :returns: reversibility and species references of reactants/products
    :rtype: dict with keys 'reversible', 'reactants', 'products'
    """
    if ('->' not in reaction_str) and ('=>' not in reaction_str):
        raise ValueError(f'reaction string "{reaction_str}" requires either "->" or "=>"')
    components = re.split(r'[=-]>', reaction_str)
    return {'reversible': '->' in reaction_str,
            'reactants': stoicstr2srefs(components[0]),
            'products': stoicstr2srefs(components[1])}


def srefs2stoic(reactants, products):
    """Combine reactants and products into signed stoichiometry.

    :param reactants: reactants with stoichiometry
    :type reactants: dict (key: species id, val: float)
    :param products: products with stoichiometry
    :type products: dict (key: species id, val: float)
    :return: species with stoichiometric coefficient (reactants negative)
    :rtype: dict (key: species id, val: float)
    """
    stoic = {}
    for sid, val in reactants.items():
        stoic[sid] = stoic.get(sid, 0.0) - val
    for sid, val in products.items():
        stoic[sid] = stoic.get(sid, 0.0) + val
    return {sid: val for sid, val in stoic.items() if val != 0.0}


def stoic2reaction_string(stoic, reversible):
    """Create reaction string from signed stoichiometry.

    :param stoic: species with stoichiometric coefficient
    :type stoic: dict (key: species id, val: float)
    :param reversible: reversibility of the reaction
    :type reversible: bool
    :return: reaction string, e.g. '2.0 A -> B'
    :rtype: str
    """
    def side(srefs):
        return ' + '.join([sid if abs(val) == 1.0 else f'{abs(val)} {sid}' for sid, val in srefs.items()])

    reactants = side({sid: val for sid, val in stoic.items() if val < 0.0})
    products = side({sid: val for sid, val in stoic.items() if val > 0.0})
    arrow = '->' if reversible else '=>'
    return f'{reactants} {arrow} {products}'.strip()
