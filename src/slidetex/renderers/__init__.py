#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers converting the slidetex AST into output markup.

- base: abstract renderer interface and output helpers
- latex: LaTeX/Beamer body renderer with a per-kind render function table

"""

from slidetex.renderers.base import BaseRenderer
from slidetex.renderers.latex import LatexFragment, LatexRenderer, RenderFunc

__all__ = ["BaseRenderer", "LatexFragment", "LatexRenderer", "RenderFunc"]
