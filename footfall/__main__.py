"""
Allow running as module: python -m footfall
Headless:                python -m footfall --headless
"""

from .main import main

if __name__ == "__main__":
    main()
