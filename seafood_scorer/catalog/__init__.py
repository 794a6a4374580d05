"""
Species catalog: immutable reference data loaded once at startup.

Modules
-------
catalog : SpeciesCatalog container + NameCollision + name normalisation.
loader  : load_catalog() — bundled JSON → validated SpeciesCatalog.
data/   : bundled species, fishing-method and FAO-area tables.
"""
