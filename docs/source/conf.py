import os
import sys

project = "fwdiff"
copyright = "2026, fwdiff developers"
author = "fwdiff developers"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.mathjax",
    "sphinx.ext.napoleon",
]

templates_path = ["_templates"]
exclude_patterns = []

html_theme = "pydata_sphinx_theme"
html_theme_options = {
    "logo": {"text": "fwdiff"},
    "navigation_depth": 1,
    "secondary_sidebar_items": ["page-toc", "sourcelink"],
}

autosummary_generate = True
autodoc_typehints = "none"

napoleon_preprocess_types = False
napoleon_attr_annotations = False
napoleon_use_ivar = True

sys.path.insert(0, os.path.abspath("../../src"))
