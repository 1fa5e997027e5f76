# Sphinx configuration for the setlib API reference.
#
# Build with:  sphinx-build -b html docs docs/_build/html
# (install the "docs" extra first)

import os
import sys
sys.path.insert(0, os.path.abspath('..'))

import setlib

# -- Project information -----------------------------------------------------

project = 'setlib'
copyright = '2024, setlib developers'
author = 'setlib developers'
release = setlib.__version__
version = '.'.join(release.split('.')[:2])

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx_autodoc_typehints',
]

exclude_patterns = ['_build']

# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'

# -- Extension configuration -------------------------------------------------

# Docstrings use Google style (Args/Returns/Raises/Example)
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_special_with_doc = False

autodoc_member_order = 'bysource'
autodoc_default_options = {
    'members': True,
    'show-inheritance': True,
    'exclude-members': '__init__,__post_init__',
}

# Element is a typing.Union alias; keep its name in signatures
autodoc_type_aliases = {'Element': 'setlib.core.schema.element.Element'}
autodoc_typehints = 'description'
autodoc_typehints_description_target = 'documented'


def skip_element_value_fields(app, what, name, obj, skip, options):
    """Skip the generated ``value`` field of the element dataclasses.

    Integer, Float, Text and Nested describe their single field in the class
    docstring, so the bare dataclass attribute would only repeat it.
    """
    if what == 'class' and name == 'value':
        return True
    return skip


def setup(app):
    app.connect('autodoc-skip-member', skip_element_value_fields)
