"""Engine-version specific accessors and child extractors.

Each module covers one engine major version's object layout.  Modules are
imported lazily by :mod:`rstree._router`.
"""
