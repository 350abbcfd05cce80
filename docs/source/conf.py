# Configuration file for the Sphinx documentation builder.
#
# This file only contains a selection of the most common options. For a
# full list see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import sys
from skdiveShape import __version__
sys.path.append("../skdiveShape")

# -- Project information -----------------------------------------------------

project = 'skdiveShape'
copyright = '2022, Sebastian Luque'
author = 'Sebastian Luque'
version = __version__
release = version

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.doctest',
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx.ext.autosummary',
    'sphinx.ext.intersphinx',
    'sphinx.ext.napoleon',
    'sphinx.ext.mathjax'
]
templates_path = ['.templates']
master_doc = 'index'
exclude_patterns = ['Thumbs.db', '.DS_Store']
pygments_style = 'sphinx'
autodoc_default_options = {
    'members': True,
    'member-order': 'groupwise'
}

# -- Options for HTML output -------------------------------------------------

html_theme = 'bizstyle'
htmlhelp_basename = 'skdiveShape_doc'

# -- Options for LaTeX output ------------------------------------------------

latex_documents = [
    (master_doc, 'index', 'skdiveShape.tex', u'skdiveShape Documentation',
     u'Sebastian Luque', 'manual'),
]

# -- Extension configuration -------------------------------------------------

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable', None),
    'pandas': ('https://pandas.pydata.org/docs', None),
    'matplotlib': ('https://matplotlib.org/stable', None),
    'xarray': ('https://docs.xarray.dev/en/stable/', None),
}
