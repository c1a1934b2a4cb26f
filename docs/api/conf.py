"""
Sphinx configuration for the limited-combo API reference.

Build with:
    pip install -e ".[docs]"
    sphinx-build -b html docs/api docs/api/_build
"""

import os
import sys
from importlib.metadata import PackageNotFoundError, version

# Autodoc imports the package straight from the src/ layout
sys.path.insert(0, os.path.abspath('../../src'))

project = 'limited-combo'
author = 'limited-combo contributors'
copyright = '2026, ' + author
try:
    release = version('limited-combo')
except PackageNotFoundError:
    release = '0.1.0'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

master_doc = 'index'
exclude_patterns = ['_build']
html_theme = 'sphinx_rtd_theme'

# The cursor API (current/next/__iter__) is documented on the class itself
autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
    'special-members': '__init__, __iter__',
    'show-inheritance': True,
}
autodoc_member_order = 'bysource'

# Docstrings use the Google style (Args/Returns/Raises)
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'pandas': ('https://pandas.pydata.org/docs', None),
}

typehints_fully_qualified = False
always_document_param_types = True
