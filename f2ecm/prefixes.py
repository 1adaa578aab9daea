"""Prefixes.py

Reserved identifier prefixes and postfixes used when extending a
metabolic network with enzyme constraint structures.

Metabolite and reaction ids of a network supplied for conversion
must not use any of these.
"""

# metabolite prefixes
M_prot = 'prot_'                   # protein pseudometabolite, e.g. 'prot_P0A9B2'
M_prot_pool = 'prot_pool'          # total protein pool

# reaction prefixes
R_usage_prot = f'usage_{M_prot}'   # protein usage reaction, protein pool -> protein
R_prot_pool = M_prot_pool          # protein pool reactions
R_prot_pool_exchange = f'{M_prot_pool}_exchange'

# reaction postfixes
REV = '_REV'       # reverse direction of a split reversible reaction
EXP = '_EXP_'      # isoenzyme copy, followed by a sequential index, e.g. 'R_PGK_EXP_2'

# reactions with names ending in this are not catalyzed by enzymes
PSEUDOREACTION = ' pseudoreaction'

# compartment of added pseudometabolites
PROT_CID = 'c'
