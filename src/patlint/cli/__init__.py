"""CLI package.

The ``cli`` sub-package contains the Click application.  Commands import
from patlint's packages lazily so ``patlint --help`` stays fast.
"""
from __future__ import annotations
