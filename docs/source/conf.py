# Configuration file for the Sphinx documentation builder.
#
# This file only contains a selection of the most common options. For a full
# list see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------

project = "poromat"
copyright = "2024-2026, PoroMat Development Team"
author = "PoroMat Development Team"


# -- General configuration ---------------------------------------------------

# Add any Sphinx extension module names here, as strings. They can be
# extensions coming with Sphinx (named 'sphinx.ext.*') or your custom
# ones.
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.imgmath",
    "sphinx.ext.napoleon",
    "sphinx.ext.todo",
    "sphinx_autodoc_typehints",
    "sphinx_rtd_theme",
]

# Add any paths that contain templates here, relative to this directory.
templates_path = ["_templates"]

# -- Extensions Configuration -------------------------------------------------

# :: napoleon
napoleon_use_param = True

# :: sphinx_autodoc_typehints
set_type_checking_flag = False

# :: sphinx.ext.imgmath
imgmath_image_format = "svg"
imgmath_font_size = 14
imgmath_use_preview = True
imgmath_latex_preamble = r"""
\usepackage{amsmath}
\usepackage{physics}
\usepackage{lmodern}
\usepackage[T1]{fontenc}

% :: Saturations ::
\newcommand{\satW}{\ensuremath{S_w}}
\newcommand{\satN}{\ensuremath{S_n}}

% :: Capillary pressure ::
\newcommand{\pcnw}{\ensuremath{p_{c,nw} = p_n - p_w}}
"""

# :: sphinx.ext.todo
todo_include_todos = True

# List of patterns, relative to source directory, that match files and
# directories to ignore when looking for source files.
exclude_patterns = []

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"

html_static_path = ["_static"]
