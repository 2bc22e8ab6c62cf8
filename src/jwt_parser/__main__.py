"""
Entry point: python -m jwt_parser [token] [--stdin] [--json]
"""

from .cli import main

if __name__ == "__main__":
    main()
