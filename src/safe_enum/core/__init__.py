"""
Core Package.

Contains the enum construction engine:
- Definition schema and validation
- Index allocation
- Member objects
- Lookup tables and diagnostics
- The frozen container and its factories
"""
