#!/usr/bin/env python3
"""
Convenience shim for 'python cli.py' from a source checkout.

Installed copies should use the 'streamfmt' command or 'python -m streamfmt'.
"""
import sys

if __name__ == "__main__":
    from streamfmt.cli import main
    sys.exit(main())
