"""
JAX-RS Lens - Entry point for CLI execution.

Allows running the package as a module: python -m jaxrs_lens
"""

from jaxrs_lens.cli import main
import sys

if __name__ == '__main__':
    sys.exit(main())
