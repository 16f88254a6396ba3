"""
CLI entry point, used by `python -m termsearch.cli`.
"""

from .main import main

if __name__ == "__main__":
    main()
