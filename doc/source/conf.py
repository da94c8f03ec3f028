# Configuration file for the Sphinx documentation builder.
#
# This file only contains a selection of the most common options. For a full
# list see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------

import os
import sys
import datetime
sys.path.insert(0, os.path.abspath('../../src'))

import decset


# -- Project information -----------------------------------------------------

project = 'decset - Set algebra on decimal intervals'
copyright = '{year}, decset contributors'.format(year=datetime.date.today().year)
author = 'decset contributors'

# The full version, including alpha/beta/rc tags
release = decset.__version__


# -- General configuration ---------------------------------------------------

extensions = [
    'autoapi.extension',
]

autoapi_dirs = ['../../src/decset']
autoapi_python_class_content = "both"

templates_path = ['_templates']
exclude_patterns = []


# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']
