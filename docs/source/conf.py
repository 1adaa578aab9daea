# f2ecm/docs/source/conf.py Sphinx configuration file

import os
import re
import sys

# -- Project information -----------------------------------------------------

project = 'f2ecm'
copyright = '2025, f2ecm developers'
author = 'f2ecm developers'


def get_version(_project):
    with open(os.path.join('../..', _project, '_version.py'), 'r') as fh:
        for line in fh:
            if re.match('__version__', line) and '=' in line:
                return re.sub(r'"', '', (line.strip().split('='))[1].strip())
    return '0.0.0'


release = get_version(project)
version = release

# run Sphinx directly from the sources
sys.path.insert(0, os.path.abspath('../..'))

# dependencies not required for building the documentation
autodoc_mock_imports = ['sbmlxdf', 'pandas', 'numpy', 'scipy']

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.viewcode',
]

# -- Options for HTML output -------------------------------------------------

html_theme = 'alabaster'
