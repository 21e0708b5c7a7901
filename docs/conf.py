#!/usr/bin/env python3
# Sphinx config

import sys
import os

_project_dir = os.path.abspath('..')
sys.path.insert(0, _project_dir)

# -- General configuration ------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
]

source_suffix = '.rst'
master_doc = 'index'

# General information about the project.
project = 'memphrase'

# The short X.Y version.
version = open(_project_dir + '/VERSION', 'r').read().strip()
# The full version, including alpha/beta/rc tags.
release = version

exclude_patterns = ['_build']

# The reST default role (used for this markup: `text`) to use for all
# documents.
default_role = 'py:obj'

pygments_style = 'sphinx'

# -- Options for manual page output ---------------------------------------

man_pages = [
    ('index', 'memphrase', 'Memorable passphrase generator', [], 1),
]
