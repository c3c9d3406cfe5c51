# Configuration file for the Sphinx documentation builder.
#
# This file only contains a selection of the most common options. For a full
# list see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------

project = "refspec"
author = "refspec contributors"
copyright = "2026, refspec contributors"


# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx_click",
    "myst_parser",
    "sphinx.ext.autodoc",
]

suppress_warnings = ["myst.header"]

# List of patterns, relative to source directory, that match files and
# directories to ignore when looking for source files.
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# Don't prepend module names to object names.
add_module_names = False

autodoc_member_order = "bysource"


# -- Options for manual page output ------------------------------------------

man_pages = [
    ("cli", "refspec", "", "", "1"),
    ("config", "refspec", "", "", "5"),
]

# Use 'man/man[0-9]' section sub-directories
man_make_section_directory = True


# -- Options for HTML output -------------------------------------------------

html_theme = "alabaster"
